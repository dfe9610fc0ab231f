"""
Hero collection API endpoints.

Mounted under the configured collection path (``/api/heroes`` by default).

Routes:
- GET /            - List heroes, optionally filtered by ?id= and ?name=
- GET /{hero_id}   - Get single hero
- POST /           - Create hero (id assigned by the store)
- PUT /            - Replace hero identified by the body id
- DELETE /{hero_id} - Delete hero

Dependencies: herodesk.boundary.store, herodesk.models
System role: In-memory web API the HTTP hero store talks to
"""


from fastapi import APIRouter, Depends, Query, Response, status

from herodesk.api.deps.dependencies import get_hero_store
from herodesk.boundary.store.base_store import HeroStore
from herodesk.models.hero import CreateHeroRequest, Hero
from herodesk.observability import get_logger

from .error_handling import handle_store_errors

logger = get_logger(__name__)

router = APIRouter(tags=["heroes"])


@router.get("", response_model=list[Hero])
@router.get("/", response_model=list[Hero], include_in_schema=False)
@handle_store_errors
async def list_heroes(
    hero_id: int | None = Query(default=None, alias="id"),
    name: str | None = None,
    store: HeroStore = Depends(get_hero_store),
) -> list[Hero]:
    """
    List heroes.

    Args:
        hero_id: Exact id filter (query parameter ``id``) (0 or 1 results)
        name: Case-sensitive name substring filter
        store: Injected hero store

    Returns:
        list[Hero]: Matching heroes
    """
    if hero_id is not None:
        heroes = list(await store.find_by_id(hero_id))
        if name is not None:
            heroes = [h for h in heroes if name in h.name]
    elif name is not None:
        heroes = list(await store.search_by_name(name))
    else:
        heroes = list(await store.list_heroes())

    logger.info(
        "Heroes listed",
        extra={"count": len(heroes), "id_filter": hero_id, "name_filter": name}
    )
    return heroes


@router.get("/{hero_id}", response_model=Hero)
@handle_store_errors
async def get_hero(
    hero_id: int,
    store: HeroStore = Depends(get_hero_store),
) -> Hero:
    """
    Get single hero by id.

    Raises:
        HTTPException(404): Hero not found
    """
    return await store.get_hero(hero_id)


@router.post("", response_model=Hero, status_code=status.HTTP_201_CREATED)
@handle_store_errors
async def create_hero(
    request: CreateHeroRequest,
    store: HeroStore = Depends(get_hero_store),
) -> Hero:
    """
    Create a hero.

    Args:
        request: New hero without id
        store: Injected hero store

    Returns:
        Hero: Created hero including assigned id
    """
    hero = await store.create_hero(request)
    logger.info("Hero created via API", extra={"hero_id": hero.id})
    return hero


@router.put("", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors
async def update_hero(
    hero: Hero,
    store: HeroStore = Depends(get_hero_store),
) -> Response:
    """
    Replace a hero identified by the body id.

    Raises:
        HTTPException(404): Hero not found
    """
    await store.update_hero(hero)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{hero_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors
async def delete_hero(
    hero_id: int,
    store: HeroStore = Depends(get_hero_store),
) -> Response:
    """
    Delete a hero.

    Raises:
        HTTPException(404): Hero not found
    """
    await store.delete_hero(hero_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
