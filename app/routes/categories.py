# app/routes/categories.py

"""Category taxonomy route."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from app.data import available_categories
from app.dependencies import RepoDep
from app.schemas import Category

router = APIRouter(prefix="/categories", tags=["🏷️ Categories"])


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[Category],
    summary="List categories",
    description=(
        "Return the category taxonomy restricted to categories that have posts. "
        "The `all` entry is always present."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        {"id": "all", "name": "All Topics", "color": "gray"},
                        {"id": "ai", "name": "Artificial Intelligence", "color": "purple"},
                    ],
                },
            },
        },
    },
    operation_id="categories_list",
)
async def list_categories(repo: RepoDep) -> list[Category]:
    """
    List the categories that currently have posts.

    Returns
    -------
    list[Category]
        Taxonomy entries in taxonomy order, `all` first.
    """
    stored = await repo.distinct_values("category")
    return available_categories(stored)
