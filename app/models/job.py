from sqlalchemy import Column, Integer, Numeric, Text, String, ForeignKey, CheckConstraint, UniqueConstraint
from app.core.database import Base


class Job(Base):
    """
    Job posting owned by a company.

    A company cannot post two jobs with the same title.
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer, nullable=True)
    equity = Column(Numeric, nullable=True)
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity >= 0 AND equity <= 1.0", name="ck_jobs_equity"),
        UniqueConstraint("title", "company_handle", name="uq_jobs_title_company"),
    )

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', company_handle='{self.company_handle}')>"
