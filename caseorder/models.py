from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Integer, Boolean, Date, DateTime, ForeignKey, func
from datetime import date, datetime
from .database import Base

class Artwork(Base):
    __tablename__ = "artwork"
    artwork_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255))
    artist: Mapped[str | None] = mapped_column(String(255), nullable=True)
    image_path: Mapped[str] = mapped_column(String(512))  # path or URL, not the binary
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

class BgColor(Base):
    __tablename__ = "bgcolor"
    bgcolor_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    bgcolor_name: Mapped[str] = mapped_column(String(120))
    hexcode_id: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

class Font(Base):
    __tablename__ = "font"
    font_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    font_name: Mapped[str] = mapped_column(String(120))
    hexcode_id: Mapped[int] = mapped_column(Integer)
    font_file_path: Mapped[str] = mapped_column(String(512))
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

class FontColor(Base):
    __tablename__ = "fontcolor"
    fontcolor_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fontcolor_name: Mapped[str] = mapped_column(String(120))
    hexcode_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

class Order(Base):
    """A finalized custom case: artwork + font + font color on a case template."""
    __tablename__ = "order"
    order_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # no ondelete rules: removing a referenced row is left to the store's FK enforcement
    artwork_id: Mapped[int] = mapped_column(ForeignKey("artwork.artwork_id"), index=True)
    font_id: Mapped[int] = mapped_column(ForeignKey("font.font_id"), index=True)
    fontcolor_id: Mapped[int] = mapped_column(ForeignKey("fontcolor.fontcolor_id"), index=True)
    normal_case_id: Mapped[int] = mapped_column(Integer)  # case template, not modelled here
    order_date: Mapped[date] = mapped_column(Date)
    order_product_folder_name: Mapped[str] = mapped_column(String(255))
    order_goods_name: Mapped[str] = mapped_column(String(255))
    order_check1: Mapped[bool] = mapped_column(Boolean, default=False)
    order_check2: Mapped[bool] = mapped_column(Boolean, default=False)
    order_download: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    artwork: Mapped["Artwork"] = relationship()
    font: Mapped["Font"] = relationship()
    fontcolor: Mapped["FontColor"] = relationship()
