"""Schemas for the user profile submitted by the questionnaire."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class UserProfile(BaseModel):
    """Questionnaire answers, kept as the strings the form submits.

    Numeric fields are parsed permissively by the calculator; range checks
    live in `services.profile_validator`. Both snake_case and camelCase keys
    are accepted on input.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    age: str = Field("", examples=["30"])
    gender: str = Field("", examples=["male"], description="male, female or other")
    height: str = Field("", examples=["175"], description="Height in centimeters")
    weight: str = Field("", examples=["70"], description="Weight in kilograms")
    activity_level: str = Field("", examples=["moderate"], description="sedentary, light, moderate or heavy")
    goal: str = Field("", examples=["maintenance"], description="weight_loss, weight_gain, muscle_building or maintenance")
    dietary_preference: str = Field("", examples=["vegetarian"], description="vegetarian, non_vegetarian or vegan")
    allergies: str = Field("", examples=["peanut, soy"], description="Comma separated allergy list")
    medical_conditions: str = ""
    meals_per_day: str = Field("3", examples=["3"], description="2, 3, 4 or 5")
    budget_range: str = Field("", examples=["medium"], description="low, medium or high")
    region_food_style: str = Field("", examples=["mixed"], description="indian, continental or mixed")


class DietPlanRequest(BaseModel):
    """Request payload for plan generation endpoints."""

    profile: UserProfile
    seed: Optional[int] = Field(None, examples=[0], description="Shuffle seed; reuse a seed to reproduce a plan")
