"""Base classes for renderer options.

This module defines the foundation shared by all option dataclasses used
throughout mdmanifest.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdmanifest.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        Raises
        ------
        ValidationError
            If a keyword does not name a field of this options class.

        """
        known = {f.name for f in fields(self)}
        for name, value in kwargs.items():
            if name not in known:
                raise ValidationError(
                    f"Unknown option '{name}' for {type(self).__name__}",
                    parameter_name=name,
                    parameter_value=value,
                )
        return replace(self, **kwargs)
