from sqlalchemy import Column, Integer, Text, text

from sqlalchemy.orm import declarative_base

Base = declarative_base()
metadata = Base.metadata


class Events(Base):
    __tablename__ = 'events'

    kind = Column(Text, nullable=False)  # 'opening' | 'appointment'
    starts_at = Column(Text, nullable=False, index=True)
    ends_at = Column(Text, nullable=False, index=True)
    weekly_recurring = Column(Integer, nullable=False, server_default=text('0'))
    id = Column(Integer, primary_key=True)
