from __future__ import annotations

import time
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping


@dataclass(frozen=True)
class Project:
    title: str
    description: str
    link: str | None = None

    @classmethod
    def from_dict(cls, d: dict) -> "Project":
        return cls(
            title=str(d.get("title", "")),
            description=str(d.get("description", "")),
            link=d.get("link") or None,
        )


@dataclass(frozen=True)
class CtfEntry:
    date: str
    event: str
    rank: str
    description: str

    @classmethod
    def from_dict(cls, d: dict) -> "CtfEntry":
        return cls(
            date=str(d.get("date", "")),
            event=str(d.get("event", "")),
            rank=str(d.get("rank", "")),
            description=str(d.get("description", "")),
        )


@dataclass(frozen=True)
class Article:
    title: str
    date: str
    read_time: str
    link: str

    @classmethod
    def from_dict(cls, d: dict) -> "Article":
        return cls(
            title=str(d.get("title", "")),
            date=str(d.get("date", "")),
            read_time=str(d.get("readTime", "")),
            link=str(d.get("link", "")),
        )


@dataclass(frozen=True)
class ContentSnapshot:
    """Portfolio content as loaded from the JSON resource.

    A field is None when the document has no such top-level key, or when
    that key is malformed; handlers treat both the same as content that has
    not loaded yet. A bad field never affects the others.
    """

    about: str | None = None
    skills: tuple[str, ...] | None = None
    projects: tuple[Project, ...] | None = None
    ctf: tuple[CtfEntry, ...] | None = None
    articles: tuple[Article, ...] | None = None
    contact: Mapping[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict,
                  on_error: Callable[[str], None] | None = None) -> "ContentSnapshot":
        """Build a snapshot from a decoded JSON object.

        Malformed top-level fields are dropped (set to None) and reported
        through on_error, one message per field.
        """
        if not isinstance(data, dict):
            raise ValueError(f"content must be a JSON object, got {type(data).__name__}")

        def report(message):
            if on_error:
                on_error(message)

        def items(key, factory):
            raw = data.get(key)
            if raw is None:
                return None
            if not isinstance(raw, list):
                report(f"Ignoring '{key}': expected a list, got {type(raw).__name__}")
                return None
            try:
                return tuple(factory(entry) for entry in raw)
            except (AttributeError, TypeError, ValueError) as e:
                report(f"Ignoring '{key}': malformed entry: {e}")
                return None

        contact = data.get("contact")
        if contact is not None:
            if isinstance(contact, dict):
                contact = MappingProxyType({str(k): str(v) for k, v in contact.items()})
            else:
                report(f"Ignoring 'contact': expected an object, got {type(contact).__name__}")
                contact = None

        about = data.get("about")
        return cls(
            about=str(about) if about is not None else None,
            skills=items("skills", str),
            projects=items("projects", Project.from_dict),
            ctf=items("ctf", CtfEntry.from_dict),
            articles=items("articles", Article.from_dict),
            contact=contact,
        )


def ts_str(t: float) -> str:
    lt = time.localtime(t)
    return time.strftime("%H:%M:%S", lt)
