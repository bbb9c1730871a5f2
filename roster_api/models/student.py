# roster_api/models/student.py
from sqlalchemy import Column, Integer, String
from roster_api.db.base_class import Base

class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # "class" is a keyword, so the attribute keeps the longer name
    class_name = Column("class", String(100), nullable=False, index=True)
    age = Column(Integer, nullable=False)
    student_id = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), nullable=False)
