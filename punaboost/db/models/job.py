"""
Job postings published by companies, and their required skills.
"""
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from punaboost.db.base import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    location = Column(String, nullable=False, default="", index=True)
    salary_from = Column(Numeric(18, 2, asdecimal=False), nullable=False)
    salary_to = Column(Numeric(18, 2, asdecimal=False), nullable=True)
    is_remote = Column(Boolean, nullable=False, default=False, index=True)

    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    industry_id = Column(Integer, ForeignKey("industries.id", ondelete="SET NULL"), nullable=True)
    country_id = Column(Integer, ForeignKey("countries.id"), nullable=True)
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=True)

    posted_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    expires_at = Column(DateTime, nullable=False)

    # Relationships
    company = relationship("Company", back_populates="jobs")
    industry = relationship("Industry")
    country = relationship("Country")
    city = relationship("City")
    skills = relationship("JobSkill", back_populates="job", cascade="all, delete-orphan")
    applications = relationship("JobApplication", back_populates="job", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_jobs_company_posted", "company_id", "posted_at"),
    )

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}')>"


class JobSkill(Base):
    __tablename__ = "job_skills"

    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True)
    skill_id = Column(Integer, ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True)

    job = relationship("Job", back_populates="skills")
    skill = relationship("Skill")
