from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from doproject.database import Base

class Project(Base):
    __tablename__ = "projects"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(128), nullable=False)
    description = Column(Text, nullable=True)
    # column name kept from the legacy schema
    user_id = Column("userID", Integer, ForeignKey("users.id"), nullable=False, index=True)

    owner = relationship("User", back_populates="projects")
    tasks = relationship("Task", back_populates="project", passive_deletes="all")
