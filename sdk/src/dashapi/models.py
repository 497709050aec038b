"""
Request and reply records exchanged with the dashboard.

Attribute names are snake_case; the JSON documents use the dashboard's
CamelCase field names, declared as aliases. Raw byte fields (logs, reports,
kernel configs, reproducers) travel as standard base64 strings.

Base64 is decoded when a record is parsed from a JSON document, either with
``model_validate_json`` or with ``from_document`` for an already decoded dict
(for example ``model_dump(mode="json")`` output). Plain ``model_validate`` and
the constructor treat text as the raw bytes.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.


import base64
from enum import IntEnum
from typing import Annotated, Any, Dict, List

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    ValidationInfo,
)


def _decode_bytes(value: Any, info: ValidationInfo) -> Any:
    if value is None:
        return b""
    # Only wire documents carry base64; Python callers pass real bytes or text.
    wire = info.mode == "json" or bool((info.context or {}).get("wire"))
    if isinstance(value, str) and wire:
        return base64.b64decode(value, validate=True)
    return value


def _encode_bytes(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def _empty_list(value: Any) -> Any:
    return [] if value is None else value


WireBytes = Annotated[
    bytes,
    BeforeValidator(_decode_bytes),
    PlainSerializer(_encode_bytes, return_type=str, when_used="json"),
]

WireStrings = Annotated[List[str], BeforeValidator(_empty_list)]


class BugStatus(IntEnum):
    """Status of a bug as reported back to the dashboard."""
    OPEN = 0
    UPSTREAM = 1
    INVALID = 2
    DUP = 3


class ReproLevel(IntEnum):
    """Strength of the available reproducer, weakest first."""
    NONE = 0
    SYZ = 1
    C = 2


class DashboardModel(BaseModel):
    """Base for all dashboard records."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_json(self) -> bytes:
        """Serialize to the JSON document sent on the wire."""
        return self.model_dump_json(by_alias=True).encode("utf-8")

    @classmethod
    def from_document(cls, document: Dict[str, Any]):
        """Build a record from a decoded JSON document, base64 fields included."""
        return cls.model_validate(document, context={"wire": True})


class Build(DashboardModel):
    """All aspects of a kernel build."""
    manager: str = Field("", alias="Manager", description="Name of the manager that built the kernel")
    id: str = Field("", alias="ID", description="Build identifier, referenced by Crash.build_id")
    syzkaller_commit: str = Field("", alias="SyzkallerCommit")
    compiler_id: str = Field("", alias="CompilerID")
    kernel_repo: str = Field("", alias="KernelRepo")
    kernel_branch: str = Field("", alias="KernelBranch")
    kernel_commit: str = Field("", alias="KernelCommit")
    kernel_config: WireBytes = Field(b"", alias="KernelConfig", description="Raw kernel .config")


class Crash(DashboardModel):
    """A single kernel crash, potentially with a reproducer."""
    build_id: str = Field("", alias="BuildID", description="Refers to Build.id")
    title: str = Field("", alias="Title")
    maintainers: WireStrings = Field(default_factory=list, alias="Maintainers")
    log: WireBytes = Field(b"", alias="Log")
    report: WireBytes = Field(b"", alias="Report")
    # Filled only after a successful reproduction.
    repro_opts: WireBytes = Field(b"", alias="ReproOpts")
    repro_syz: WireBytes = Field(b"", alias="ReproSyz")
    repro_c: WireBytes = Field(b"", alias="ReproC")


class FailedRepro(DashboardModel):
    """A failed reproduction attempt."""
    manager: str = Field("", alias="Manager")
    build_id: str = Field("", alias="BuildID")
    title: str = Field("", alias="Title")


class LogEntry(DashboardModel):
    """A named log line for centralized logging on the dashboard."""
    name: str = Field("", alias="Name")
    text: str = Field("", alias="Text")


class BugReport(DashboardModel):
    """A single bug, as handed out for external reporting."""
    config: WireBytes = Field(b"", alias="Config", description="Reporting configuration")
    id: str = Field("", alias="ID")
    title: str = Field("", alias="Title")
    maintainers: WireStrings = Field(default_factory=list, alias="Maintainers")
    compiler_id: str = Field("", alias="CompilerID")
    kernel_repo: str = Field("", alias="KernelRepo")
    kernel_branch: str = Field("", alias="KernelBranch")
    kernel_commit: str = Field("", alias="KernelCommit")
    log: WireBytes = Field(b"", alias="Log")
    report: WireBytes = Field(b"", alias="Report")
    kernel_config: WireBytes = Field(b"", alias="KernelConfig")
    repro_c: WireBytes = Field(b"", alias="ReproC")
    repro_syz: WireBytes = Field(b"", alias="ReproSyz")

    @property
    def repro_level(self) -> ReproLevel:
        """Strongest reproducer attached to the report."""
        if self.repro_c:
            return ReproLevel.C
        if self.repro_syz:
            return ReproLevel.SYZ
        return ReproLevel.NONE


class BugUpdate(DashboardModel):
    """Status update for a reported bug."""
    id: str = Field("", alias="ID")
    status: BugStatus = Field(BugStatus.OPEN, alias="Status")
    repro_level: ReproLevel = Field(ReproLevel.NONE, alias="ReproLevel")
    dup_of: str = Field("", alias="DupOf", description="ID of the bug this one duplicates")


class PollRequest(DashboardModel):
    """Ask for pending reports of a given reporting type."""
    type: str = Field("", alias="Type")


class PollResponse(DashboardModel):
    """Reports the dashboard wants reported externally, in server order."""
    reports: Annotated[List[BugReport], BeforeValidator(_empty_list)] = Field(
        default_factory=list, alias="Reports"
    )
