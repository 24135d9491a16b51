from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from doproject.database import Base

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)

    projects = relationship("Project", back_populates="owner", passive_deletes="all")
