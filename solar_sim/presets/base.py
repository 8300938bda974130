"""Base class for preset scenes."""

from abc import ABC, abstractmethod
from typing import List, Optional

from solar_sim.physics.body import Body
from solar_sim.physics.gravity import G_SI


class Preset(ABC):
    """Abstract base class for preset scenes."""

    G = G_SI

    def __init__(self, context):
        """Initialize preset.

        Args:
            context: PrecisionContext used for every scalar
        """
        self.context = context

    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial bodies.

        Returns:
            List of Body
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass

    @property
    def reference_frame_id(self) -> Optional[str]:
        """Id of the body this preset flags as reference frame, if any."""
        return None
