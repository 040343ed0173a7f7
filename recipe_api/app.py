import logging
from contextlib import asynccontextmanager
from typing import List

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import crud, schemas
from .config import CORS_ORIGINS, SEED_ON_STARTUP
from .db import SessionLocal, close_db, engine, init_db
from .exceptions import NotFoundError, RecipeAPIError
from .seed import seed_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The engine lives for the whole process; dispose of it on shutdown
    init_db()
    if SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            seed_database(engine, db)
        finally:
            db.close()
    logger.info("Recipe API started")
    yield
    close_db()


app = FastAPI(title="Recipe API", lifespan=lifespan)

# Allow CORS for API clients (set CORS_ORIGINS for production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RecipeAPIError)
async def recipe_api_error_handler(request: Request, exc: RecipeAPIError):
    return JSONResponse(status_code=exc.status_code, content=exc.as_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
):
    # Missing or badly typed fields are a plain 400 for this API
    return JSONResponse(
        status_code=400, content={"detail": jsonable_encoder(exc.errors())}
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Database error"})


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@app.get("/api/categories", response_model=List[schemas.Category])
def list_categories(db: Session = Depends(get_db)):
    return crud.get_categories(db)


@app.get("/api/recipes/{category}", response_model=List[schemas.Recipe])
def list_recipes_by_category(category: str, db: Session = Depends(get_db)):
    if crud.get_category_by_name(db, category) is None:
        raise NotFoundError(f"Category not found: {category}")
    return crud.get_recipes_by_category(db, category)


@app.get("/api/recipe/random", response_model=List[schemas.Recipe])
def random_recipe(db: Session = Depends(get_db)):
    r = crud.get_random_recipe(db)
    # wrapped in a list, same as the other recipe endpoints
    return [r] if r is not None else []


@app.post(
    "/api/recipe", response_model=List[schemas.Recipe], status_code=201
)
def create_recipe(recipe: schemas.RecipeCreate, db: Session = Depends(get_db)):
    return [crud.create_recipe(db, recipe)]
