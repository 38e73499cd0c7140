"""Carbon footprints of buildings, bicycles and cars."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CarbonFootprint(ABC):
    """Something whose carbon footprint can be measured in kg CO2e."""

    label = "Item"
    _unit = " kg CO2e\n"

    @abstractmethod
    def carbon_footprint(self) -> float:
        """Return the footprint in kg CO2e."""

    def describe(self) -> str:
        return f"Carbon Footprint of {self.label}: {self.carbon_footprint():.6f}{self._unit}"


class Building(CarbonFootprint):
    label = "Building"
    _unit = " kg CO2e \n"

    def __init__(
        self, embodied_carbon: float, operational_carbon: float, carbon_sequestration: float
    ) -> None:
        self.embodied_carbon = embodied_carbon
        self.operational_carbon = operational_carbon
        self.carbon_sequestration = carbon_sequestration

    def carbon_footprint(self) -> float:
        return self.embodied_carbon + self.operational_carbon - self.carbon_sequestration


class Bicycle(CarbonFootprint):
    label = "Bicycle"

    def __init__(self, distance: float = 0.0) -> None:
        self.distance = distance

    def carbon_footprint(self) -> float:
        return 0.05 * self.distance


class Car(CarbonFootprint):
    label = "Car"

    def __init__(
        self, distance: float = 0.0, fuel_efficiency: float = 16.5, emissions_factor: float = 4.6
    ) -> None:
        self.distance = distance
        self.fuel_efficiency = fuel_efficiency
        self.emissions_factor = emissions_factor

    def carbon_footprint(self) -> float:
        return self.distance / self.fuel_efficiency * self.emissions_factor


def main(argv=None) -> int:
    """Print the footprints of a sample building, bicycle and car."""
    items: list[CarbonFootprint] = [
        Building(500, 30, 200),
        Bicycle(500),
        Car(500, 11.9, 2.31),
    ]
    for item in items:
        print(item.describe())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())