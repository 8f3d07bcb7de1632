"""
Correlation of two applications' service bindings.
"""

import logging
from typing import Optional

from kibana_me_logs.entities.ServiceBinding import ServiceBinding
from kibana_me_logs.exceptions import CorrelationMismatchError


def correlate(binding_a: ServiceBinding, binding_b: ServiceBinding) -> bool:
    """True iff both bindings point at the same, named service instance."""
    return bool(binding_a.name) and binding_a.name == binding_b.name


class CorrelateBindingsUseCase:
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, kibana_binding: ServiceBinding, app_binding: ServiceBinding) -> str:
        """Return the shared service name or raise CorrelationMismatchError."""
        if not correlate(kibana_binding, app_binding):
            self._logger.error(
                f"Service mismatch: kibana uses '{kibana_binding.name}', "
                f"app uses '{app_binding.name}'"
            )
            label = kibana_binding.label or app_binding.label
            raise CorrelationMismatchError(
                f"app and kibana do not share the same {label} service"
            )
        self._logger.info(f"Both apps share service '{kibana_binding.name}'")
        return kibana_binding.name
