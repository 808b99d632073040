"""Simulation-wide configuration parameters not tied to any unit."""

from __future__ import annotations

from collections.abc import Mapping


class SimulationConfiguration:
    """A bag of named parameters that any part of the model may read.

    ``post_create`` ensures the ``workload`` parameter exists, defaulting
    to an empty string when it was not supplied.
    """

    def __init__(
        self,
        parameters: Mapping[str, object] | None = None,
        descriptions: Mapping[str, str] | None = None,
    ) -> None:
        self.parameters: dict[str, object] = dict(parameters or {})
        self.descriptions: dict[str, str] = dict(descriptions or {})

    def post_create(self) -> None:
        """Add the ``workload`` parameter if it is not already present."""
        if "workload" not in self.parameters:
            self.parameters["workload"] = ""
            self.descriptions["workload"] = "Workload to run"

    def __getitem__(self, name: str) -> object:
        return self.parameters[name]

    def __contains__(self, name: object) -> bool:
        return name in self.parameters