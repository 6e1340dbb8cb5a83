import enum
import uuid

from sqlalchemy import Column, String, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship

from .session import Base


def uuid4_str():
    return str(uuid.uuid4())


class ResultType(str, enum.Enum):
    """Assay used to produce a result."""
    RTPCR = "rtpcr"
    ANTIGEN = "antigen"
    ANTIBODY = "antibody"


class Organisation(Base):
    __tablename__ = "organisations"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=uuid4_str)
    name = Column(String(255), nullable=False)

    profiles = relationship("Profile", back_populates="organisation")


class Profile(Base):
    """A patient within one organisation."""
    __tablename__ = "profiles"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=uuid4_str)
    organisation_id = Column(
        Uuid(as_uuid=False), ForeignKey("organisations.id", ondelete="CASCADE"), nullable=False
    )
    name = Column(String(255), nullable=False)

    organisation = relationship("Organisation", back_populates="profiles")
    results = relationship("Result", back_populates="profile")

    __table_args__ = (Index("ix_profiles_organisation_id", "organisation_id"),)


class Result(Base):
    """A sample result. Timestamps are kept as 'YYYY-MM-DD HH:MM:SS' strings and returned verbatim."""
    __tablename__ = "results"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=uuid4_str)
    profile_id = Column(
        Uuid(as_uuid=False), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )
    result = Column(String(50), nullable=False)
    sample_id = Column(String(100), nullable=False)
    type = Column(String(50), nullable=False)
    activate_time = Column(String(32), nullable=False)
    result_time = Column(String(32), nullable=False)

    profile = relationship("Profile", back_populates="results")

    __table_args__ = (
        Index("ix_results_profile_id", "profile_id"),
        Index("ix_results_sample_id", "sample_id"),
    )
