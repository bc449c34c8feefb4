from dataclasses import asdict
from fastapi import APIRouter, Depends
from burnscale.api.deps import Authed
from burnscale.repositories.customization_repo import list_customizations, set_customization
from burnscale.schemas.customization import CustomizationIn, OptionPoolsOut
from burnscale.services.customization import build_option_pools

router = APIRouter(prefix="/api/customizations", tags=["customizations"])

async def _pools(ctx) -> dict:
    rows = await list_customizations(ctx["db"], ctx["user_id"])
    return asdict(build_option_pools(rows))

@router.get("", response_model=OptionPoolsOut)
async def get_options(ctx=Depends(Authed)):
    return await _pools(ctx)

@router.post("", response_model=OptionPoolsOut, status_code=201)
async def add_option(payload: CustomizationIn, ctx=Depends(Authed)):
    await set_customization(ctx["db"], ctx["user_id"], payload.type, payload.value, is_active=True)
    return await _pools(ctx)

@router.post("/hide", response_model=OptionPoolsOut)
async def hide_option(payload: CustomizationIn, ctx=Depends(Authed)):
    await set_customization(ctx["db"], ctx["user_id"], payload.type, payload.value, is_active=False)
    return await _pools(ctx)
