# app/models/user.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    # Nullable so the open (AUTH_ENABLED=false) variant can sign users up by name only
    email = Column(String, unique=True, index=True, nullable=True)
    password_hash = Column(String, nullable=True)
    default_currency_id = Column(Integer, ForeignKey("currencies.id", ondelete="SET NULL"), nullable=True)

    default_currency = relationship("Currency", lazy="joined")   # see currency.py

    def __repr__(self):
        return f"<User id={self.id} name={self.name}>"
