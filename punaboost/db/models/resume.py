from datetime import datetime

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from punaboost.db.base import Base


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    file_name = Column(String, nullable=False, default="")
    file_url = Column(String, nullable=False, default="")
    name = Column(String, nullable=False, default="")
    candidate_id = Column(Integer, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    is_default = Column(Boolean, nullable=False, default=False)

    candidate = relationship("Candidate", back_populates="resumes")
    applications = relationship("JobApplication", back_populates="resume")
