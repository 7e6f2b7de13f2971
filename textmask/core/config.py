"""Named mask profiles loaded from YAML.

A profile file maps names to a mask type and its options::

    masks:
      us-phone:
        type: custom
        options:
          mask: "(999) 999-9999"
      price:
        type: money
        options: {unit: "$", separator: ".", delimiter: ","}

Profiles are plain configuration: a profile naming an unknown type still
loads and resolves to the passthrough handler.
"""

from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError, create_configuration_error


class MaskProfile(BaseModel):
    """Pydantic model for a single named mask."""

    type: str = Field(default="none", description="Mask type identifier")
    options: dict[str, Any] = Field(
        default_factory=dict, description="Handler options"
    )
    description: Optional[str] = Field(None, description="Free-form note")


class MaskProfileSet(BaseModel):
    """Pydantic model for a profile file."""

    masks: dict[str, MaskProfile] = Field(default_factory=dict)

    def names(self) -> list[str]:
        """Profile names in file order."""
        return list(self.masks)

    def get(self, name: str) -> MaskProfile:
        """Look up a profile by name.

        Raises:
            ConfigurationError: If no profile has that name
        """
        try:
            return self.masks[name]
        except KeyError:
            error = ConfigurationError(
                f"Unknown mask profile '{name}'", profile_name=name
            )
            error.add_context("available_profiles", self.names())
            error.add_recovery_suggestion("Check the profile name for typos")
            raise error from None

    @classmethod
    def from_dict(
        cls, data: Any, source: Optional[str] = None
    ) -> "MaskProfileSet":
        """Validate already-parsed profile data."""
        if data is None:
            return cls()
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise create_configuration_error(
                f"Invalid mask profile data: {e.error_count()} error(s)",
                config_file=source or "<dict>",
                original_error=e,
            ) from e


def load_profiles(path: Union[str, Path]) -> MaskProfileSet:
    """Load mask profiles from a YAML file.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, or does
            not match the profile schema
    """
    path = Path(path)
    if not path.exists():
        error = ConfigurationError(
            f"Mask profile file not found: {path}", config_file=str(path)
        )
        error.add_recovery_suggestion("Check the path passed to load_profiles")
        raise error

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise create_configuration_error(
            f"Invalid YAML in mask profile file: {path}",
            config_file=str(path),
            original_error=e,
        ) from e

    return MaskProfileSet.from_dict(data, source=str(path))
