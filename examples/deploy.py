from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal

from structargs import App, field
from structargs.utils import setup_logging


class Place(Enum):
    """Enum for different places."""

    NEW_YORK = "New York"
    SAN_FRANCISCO = "San Francisco"
    LONDON = "London"

    def __str__(self):
        return self.value


@dataclass(kw_only=True)
class DeployOptions:
    """Deploy a service."""

    service: Literal["web", "database", "cache"] = field(help="Service name to deploy.")
    place: Place = field(
        default=Place.NEW_YORK, help="Place where the service will be deployed."
    )
    region: str | None = field(default="us-east-1", help="Deployment region.")
    path: Path | None = field(default=None, help="Path to the configuration file.")
    tag: str | None = field(default=None, help="Optional tag for the deployment.")
    verbose: bool | None = field(default=False, help="Enable verbose output.")
    numbers: list[int] | None = field(default=None, help="Optional list of numbers.")


def main() -> None:
    setup_logging(mode="cli")
    app = App(
        name="deploy",
        version="1.0.0",
        description="Deploy a service to a region.",
        epilog="Example: deploy web LONDON --region eu-west-1 -n 1 2 3",
    )
    options = app.run(DeployOptions)
    numbers = "|".join(str(number) for number in options.numbers or [])
    if options.verbose:
        print(
            f"Deploying {options.service}:{options.tag}:{numbers} to {options.region} "
            f"at {options.place} from {options.path}..."
        )
    print(
        f"{options.service}:{options.tag}:{numbers} deployed to {options.region} "
        f"at {options.place} from {options.path}."
    )


if __name__ == "__main__":
    main()
