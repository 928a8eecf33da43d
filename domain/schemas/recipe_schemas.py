"""Pydantic schemas for TheMealDB payloads and normalized recipes."""

from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional, Tuple

# TheMealDB spreads ingredients over strIngredient1..20 / strMeasure1..20
MEAL_SLOT_COUNT = 20


# ---------------------------------------------------------------------------
# TheMealDB wire shapes (read-only)
# ---------------------------------------------------------------------------


class MealSummary(BaseModel):
    """One entry of a filter.php listing."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(alias="idMeal")
    name: str = Field(default="", alias="strMeal")
    thumbnail: Optional[str] = Field(default=None, alias="strMealThumb")


class MealListResponse(BaseModel):
    """filter.php response; ``meals`` is null when nothing matched."""

    meals: Optional[List[MealSummary]] = None


class RawMeal(BaseModel):
    """Full meal record from lookup.php.

    Only the scalar fields are declared; the numbered ingredient and measure
    slots are kept as extra fields and read through ``slot()``.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(alias="idMeal")
    name: str = Field(default="", alias="strMeal")
    category: Optional[str] = Field(default=None, alias="strCategory")
    area: Optional[str] = Field(default=None, alias="strArea")
    instructions: Optional[str] = Field(default=None, alias="strInstructions")
    thumbnail: Optional[str] = Field(default=None, alias="strMealThumb")
    tags: Optional[str] = Field(default=None, alias="strTags")
    youtube: Optional[str] = Field(default=None, alias="strYoutube")

    def slot(self, index: int) -> Tuple[Optional[str], Optional[str]]:
        """Return the (ingredient, measure) pair stored at a 1-based slot."""
        extra = self.model_extra or {}
        return extra.get(f"strIngredient{index}"), extra.get(f"strMeasure{index}")


class MealDetailResponse(BaseModel):
    """lookup.php response; zero or one record."""

    meals: Optional[List[RawMeal]] = None


class Category(BaseModel):
    """One entry of the list.php?c=list catalogue."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(alias="strCategory")


class CategoryListResponse(BaseModel):
    meals: Optional[List[Category]] = None


# ---------------------------------------------------------------------------
# Normalized recipe
# ---------------------------------------------------------------------------


class Ingredient(BaseModel):
    """Ingredient line of a recipe."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Trimmed ingredient name")
    measure: str = Field(default="", description="Unit-expanded measure")


class Recipe(BaseModel):
    """Recipe ready for display."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    category: Optional[str] = None
    area: Optional[str] = None
    instructions: Optional[str] = None
    image: str = Field(default="", description="Thumbnail or fallback image URL")
    tags: List[str] = []
    youtube_url: Optional[str] = Field(default=None, alias="youtubeUrl")
    ingredients: List[Ingredient] = []


class CategoryNames(BaseModel):
    """Response body for the category catalogue endpoint."""

    categories: List[str]
