# ifthen/config/modules/client.py
"""
Client Module Configuration

Configuration for client script synthesis.
"""

from dataclasses import dataclass
from .base import ModuleConfig


@dataclass(frozen=True)
class ClientConfig(ModuleConfig):
    """
    Client script configuration.

    use_dynamic_guard_value: Default addressing mode for rules that don't set
        one (True = live form value, False = render-time snapshot)
    value_placeholder: Token client checks use for the current field value
    field_lookup_template: Live lookup expression; {id} is the element id
    """

    enabled: bool = True
    use_dynamic_guard_value: bool = True
    value_placeholder: str = "value"
    field_lookup_template: str = 'jQuery("#{id}").val()'

    @classmethod
    def default(cls) -> "ClientConfig":
        return cls()
