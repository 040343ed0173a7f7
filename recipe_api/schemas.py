from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Category(BaseModel):
    id: int
    category_name: str

    model_config = ConfigDict(from_attributes=True)


class IngredientBase(BaseModel):
    ingredient: str = Field(
        ..., json_schema_extra={"example": "Chicken thighs"}
    )
    measurement: str = Field(
        "", json_schema_extra={"example": "500g"}
    )


class IngredientCreate(IngredientBase):
    ingredient: str = Field(
        ..., min_length=1, json_schema_extra={"example": "Chicken thighs"}
    )

    model_config = ConfigDict(str_strip_whitespace=True)


class Ingredient(IngredientBase):
    model_config = ConfigDict(from_attributes=True)


class RecipeBase(BaseModel):
    title: str = Field(
        ..., json_schema_extra={"example": "Chicken Curry"}
    )
    category: str = Field(
        ..., json_schema_extra={"example": "chicken"}
    )
    instructions: str = Field(
        "", json_schema_extra={"example": "Brown the chicken, add the sauce."}
    )
    image: str = Field(
        "", json_schema_extra={"example": "https://example.com/curry.jpg"}
    )
    youtube: str = Field(
        "",
        json_schema_extra={"example": "https://www.youtube.com/watch?v=abc"},
    )


class RecipeCreate(RecipeBase):
    # blank (whitespace-only) values count as missing
    title: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    instructions: str = Field(..., min_length=1)
    ingredients: List[IngredientCreate] = Field(default_factory=list)

    model_config = ConfigDict(str_strip_whitespace=True)


class Recipe(RecipeBase):
    id: int
    ingredients: List[Ingredient] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
