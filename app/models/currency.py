# app/models/currency.py
from sqlalchemy import Column, Integer, String
from app.core.database import Base

class Currency(Base):
    __tablename__ = "currencies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Stored upper-cased, e.g. "USD"
    code = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)

    def __repr__(self):
        return f"<Currency code={self.code}>"
