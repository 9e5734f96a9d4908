"""SQLAlchemy models for the quarta record store."""

from sqlalchemy import Column, Engine, Float, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

Base = declarative_base()

MEMORY_DATABASE_URL = "sqlite://"


class Transaction(Base):
    """Ingested transaction row."""

    __tablename__ = "transactions"

    # Ingestion order; rows are always read back sorted on it.
    position = Column(Integer, primary_key=True)
    date = Column(String, nullable=False)
    transaction = Column(String, nullable=False)
    amount = Column(Float, nullable=False)
    tags = Column(String, nullable=True)
    counterparty_id = Column(String, nullable=True)
    remarks = Column(String, nullable=True)


def create_database_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine with the schema in place."""
    if database_url == MEMORY_DATABASE_URL:
        # One shared connection, otherwise each checkout sees a fresh empty database.
        engine = create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory bound to engine."""
    return sessionmaker(bind=engine)
