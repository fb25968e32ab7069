import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from punaboost.db.base import Base


class ApplicationStatus(str, enum.Enum):
    PENDING = "Pending"
    REVIEWED = "Reviewed"
    SHORTLISTED = "Shortlisted"
    INTERVIEW = "Interview"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class JobApplication(Base):
    __tablename__ = "job_applications"

    id = Column(Integer, primary_key=True, index=True)
    status = Column(
        Enum(ApplicationStatus, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
        default=ApplicationStatus.PENDING,
    )
    candidate_id = Column(Integer, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    resume_id = Column(Integer, ForeignKey("resumes.id", ondelete="SET NULL"), nullable=True)
    applied_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    notes = Column(Text, nullable=False, default="")

    candidate = relationship("Candidate", back_populates="applications")
    job = relationship("Job", back_populates="applications")
    resume = relationship("Resume", back_populates="applications")

    __table_args__ = (
        UniqueConstraint("job_id", "candidate_id", name="uq_job_applications_job_candidate"),
    )

    def __repr__(self):
        return f"<JobApplication(id={self.id}, job_id={self.job_id}, status='{self.status}')>"
