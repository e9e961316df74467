from sqlalchemy import Column, Integer, String, Text, CheckConstraint
from app.core.database import Base


class Company(Base):
    """
    Company that posts jobs.

    The handle is the public, immutable key used in URLs and by jobs.
    """
    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(Text, unique=True, nullable=False)
    num_employees = Column(Integer, nullable=True)
    description = Column(Text, nullable=False)
    logo_url = Column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )

    def __repr__(self):
        return f"<Company(handle='{self.handle}', name='{self.name}')>"
