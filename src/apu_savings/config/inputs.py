"""Fleet inputs — the user-editable parameters of one calculation."""

from pydantic import BaseModel, ConfigDict, Field


class FleetInputs(BaseModel):
    """Fleet and cost parameters, fixed per calculation.

    No range constraints: zero, negative and non-finite values are
    accepted and flow through the arithmetic unchanged.  Every field is a
    float, including fleet size and useful life.
    """

    model_config = ConfigDict(frozen=True)

    fleet_size: float = Field(default=20, description="Number of trucks in the fleet")
    idle_time: float = Field(default=8, description="Idle hours per truck per day")
    fuel_price: float = Field(default=3.50, description="Diesel price ($/gallon)")
    apu_installation_cost: float = Field(
        default=10_000,
        description="Upfront APU purchase + installation cost per truck ($)",
    )
    apu_maintenance_cost: float = Field(
        default=500,
        description="Annual APU maintenance cost per truck ($)",
    )
    apu_useful_life: float = Field(
        default=5,
        description="Years before the APU needs replacing. Also the length "
                    "of the cumulative savings series.",
    )
    operating_days_per_year: float = Field(default=300, description="Days per year the trucks operate")
