"""Capability types for the truck step builder.

Each step exposes exactly one operation, which returns the next step. A
caller holding an EngineBuildStep can only pick an engine, and so on until
PickupTruckBuilder, which can only build.
"""

from abc import ABC, abstractmethod

from pickup_patterns.fleet.truck import PickupTruck


class EngineBuildStep(ABC):
    @abstractmethod
    def with_engine(self, engine_type: int) -> "TransmissionBuildStep":
        ...


class TransmissionBuildStep(ABC):
    @abstractmethod
    def and_transmission(self, transmission_type: int) -> "TrimOptionBuildStep":
        ...


class TrimOptionBuildStep(ABC):
    @abstractmethod
    def and_trim_option(self, trim_type: int) -> "PackageOptionBuildStep":
        ...


class PackageOptionBuildStep(ABC):
    @abstractmethod
    def and_package(self, package_type: int) -> "PickupTruckBuilder":
        ...


class PickupTruckBuilder(ABC):
    @abstractmethod
    def build(self) -> PickupTruck:
        """Create the truck from the accumulated options."""
        ...
