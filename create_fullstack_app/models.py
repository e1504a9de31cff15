"""Pydantic v2 models for the project generator.

Defines the resolved project request, the recognised template kinds, and the
located template sources that feed the scaffolder.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FrontendKind(str, Enum):
    """Frontend template flavours shipped with the generator."""
    REACT_JS = "react-js"
    REACT_TS = "react-ts"


class DatabaseKind(str, Enum):
    """Backend template flavours, one per database."""
    POSTGRESQL = "postgresql-server"
    MONGODB = "mongodb-server"


class TemplateRole(str, Enum):
    """Which half of the project a template provides."""
    FRONTEND = "Frontend"
    BACKEND = "Backend"


# Display label for each interactive choice, in prompt order.
FRONTEND_CHOICES: dict[str, str] = {
    FrontendKind.REACT_JS.value: "Traditional ReactJS (jsx)",
    FrontendKind.REACT_TS.value: "React with TypeScript (tsx)",
}

DATABASE_CHOICES: dict[str, str] = {
    DatabaseKind.POSTGRESQL.value: "PostgreSQL",
    DatabaseKind.MONGODB.value: "MongoDB",
}


# ---------------------------------------------------------------------------
# Request & source models
# ---------------------------------------------------------------------------

class ProjectRequest(BaseModel):
    """The three resolved inputs of one generator invocation.

    Kinds are kept as plain strings: a value given on the command line is used
    as-is and only checked later, when its template directory is located.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Project directory and package name")
    frontend: str = Field(..., min_length=1)
    database: str = Field(..., min_length=1)


class TemplateSource(BaseModel):
    """A located, read-only template directory."""

    model_config = ConfigDict(frozen=True)

    role: TemplateRole
    kind: str
    path: Path
