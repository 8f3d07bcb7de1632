"""
Service binding domain entity.
"""

from typing import Any, Mapping, Optional


class ServiceBinding:
    """
    One bound service instance as reported in an application's VCAP_SERVICES.

    The credentials mapping is service-defined and passed through untouched.
    """

    def __init__(
        self,
        name: str,
        label: str,
        tags: Optional[list[str]] = None,
        plan: str = "",
        credentials: Optional[Mapping[str, Any]] = None,
    ):
        self.name = name or ""
        self.label = label or ""
        self.tags = list(tags or [])
        self.plan = plan or ""
        self.credentials: dict[str, Any] = dict(credentials or {})

    @classmethod
    def from_vcap_entry(cls, entry: Mapping[str, Any], label: str) -> "ServiceBinding":
        """Build a binding from one entry of a VCAP_SERVICES group."""
        tags = entry.get("tags") or []
        credentials = entry.get("credentials") or {}
        if not isinstance(tags, list):
            raise TypeError(f"'tags' must be a list, got {type(tags).__name__}")
        if not isinstance(credentials, Mapping):
            raise TypeError(
                f"'credentials' must be an object, got {type(credentials).__name__}"
            )
        return cls(
            name=str(entry.get("name") or ""),
            label=str(entry.get("label") or label),
            tags=[str(t) for t in tags],
            plan=str(entry.get("plan") or ""),
            credentials=credentials,
        )

    def get_details(self) -> dict[str, Any]:
        """Binding metadata without credentials."""
        return {
            "name": self.name,
            "label": self.label,
            "tags": list(self.tags),
            "plan": self.plan,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServiceBinding):
            return NotImplemented
        return (
            self.name == other.name
            and self.label == other.label
            and self.tags == other.tags
            and self.plan == other.plan
            and self.credentials == other.credentials
        )

    def __str__(self) -> str:
        return f"ServiceBinding(name='{self.name}', label='{self.label}', plan='{self.plan}')"
