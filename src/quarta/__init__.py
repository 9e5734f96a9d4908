# Import main lazily to avoid circular dependencies
def __getattr__(name):
    if name == "main":
        from quarta.cli.main import main
        return main
    if name == "InsightsEngine":
        from quarta.engine import InsightsEngine
        return InsightsEngine
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
