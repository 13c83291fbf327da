__all__ = [
    "Car",
    "Vehicle",
]
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True, slots=True)
class Vehicle:
    make: str
    year: int

    def get_info(self) -> str:
        """Describe the make and the model year of the vehicle."""
        info = f"Make: {self.make}, Year: {self.year}"
        logger.info(info)
        return info


@dataclass(frozen=True, kw_only=True, slots=True)
class Car(Vehicle):
    model: str

    def get_model(self) -> str:
        model = f"Model: {self.model}"
        logger.info(model)
        return model
