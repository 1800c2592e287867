"""Example consumer ORM models: navigation_classes, example_classes, example_tags."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from servicebase.infrastructure.database import Base


class NavigationClass(Base):
    """Parent row that example classes point at."""

    __tablename__ = "navigation_classes"
    __table_args__ = (UniqueConstraint("name", name="uq_navigation_classes_name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    example_classes: Mapped[list["ExampleClass"]] = relationship(
        back_populates="navigation_class", cascade="all, delete-orphan"
    )


class ExampleClass(Base):
    __tablename__ = "example_classes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    navigation_class_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("navigation_classes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)

    navigation_class: Mapped["NavigationClass"] = relationship(back_populates="example_classes")
    tags: Mapped[list["ExampleTag"]] = relationship(
        back_populates="example_class", cascade="all, delete-orphan"
    )


class ExampleTag(Base):
    """Tag on an example class.

    Composite key (example_class_id, label): key values are passed to the
    repository in that order.
    """

    __tablename__ = "example_tags"

    example_class_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("example_classes.id", ondelete="CASCADE"), primary_key=True
    )
    label: Mapped[str] = mapped_column(Text, primary_key=True)
    weight: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    example_class: Mapped["ExampleClass"] = relationship(back_populates="tags")
