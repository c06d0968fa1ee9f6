"""Catalog of deployable units"""

import logging
from typing import Dict, Iterator, List, Optional, Any

from ..api.exceptions import ConfigError
from ..constants import DEFAULT_LAMBDAS_DIR, DEFAULT_UNITS
from ..models.unit import UnitSpec

logger = logging.getLogger(__name__)


class UnitCatalog:
    """Ordered, name-unique list of units loaded once per run"""

    def __init__(self, units: List[UnitSpec], lambdas_dir: str = DEFAULT_LAMBDAS_DIR):
        seen = set()
        for unit in units:
            if unit.name in seen:
                raise ConfigError(f"Duplicate unit name in catalog: {unit.name}")
            seen.add(unit.name)

        self._units = list(units)
        self.lambdas_dir = lambdas_dir

    @classmethod
    def default(cls, lambdas_dir: str = DEFAULT_LAMBDAS_DIR) -> 'UnitCatalog':
        """Catalog of the standard SAM functions"""
        return cls([UnitSpec.for_name(name, lambdas_dir) for name in DEFAULT_UNITS], lambdas_dir)

    @classmethod
    def from_config(cls,
                    entries: Optional[List[Dict[str, Any]]],
                    lambdas_dir: str = DEFAULT_LAMBDAS_DIR) -> 'UnitCatalog':
        """Build from the 'units' config section, falling back to the defaults"""
        if not entries:
            return cls.default(lambdas_dir)

        try:
            units = [UnitSpec.from_dict(entry, lambdas_dir) for entry in entries]
        except ValueError as e:
            raise ConfigError(f"Invalid unit entry: {e}")

        return cls(units, lambdas_dir)

    def __iter__(self) -> Iterator[UnitSpec]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    @property
    def names(self) -> List[str]:
        return [unit.name for unit in self._units]

    def get(self, name: str) -> Optional[UnitSpec]:
        for unit in self._units:
            if unit.name == name:
                return unit
        return None

    def select(self, name: Optional[str] = None) -> List[UnitSpec]:
        """Units in scope for a run

        Args:
            name: Restrict the run to this unit. A name outside the catalog
                  still yields a unit at the conventional location, so that
                  a missing source is reported per unit rather than rejected.

        Returns:
            Units in catalog order
        """
        if not name:
            return list(self._units)

        unit = self.get(name)
        if unit is None:
            logger.warning(f"Unit '{name}' is not in the catalog, using {self.lambdas_dir}/{name}")
            try:
                unit = UnitSpec.for_name(name, self.lambdas_dir)
            except ValueError as e:
                raise ConfigError(str(e))
        return [unit]
