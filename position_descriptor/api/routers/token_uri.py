from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from position_descriptor.api.deps import get_construct_token_uri_use_case
from position_descriptor.api.schemas.token_uri import TokenURIRequest, TokenURIResponse
from position_descriptor.application.dto.token_uri import ConstructTokenURIInput
from position_descriptor.application.use_cases.construct_token_uri import ConstructTokenURIUseCase
from position_descriptor.domain.exceptions import TokenURIInputError

router = APIRouter()


@router.post("/v1/token-uri", response_model=TokenURIResponse)
def token_uri(
    req: TokenURIRequest,
    use_case: ConstructTokenURIUseCase = Depends(get_construct_token_uri_use_case),
):
    try:
        result = use_case.execute(
            ConstructTokenURIInput(
                token0=req.token0,
                token1=req.token1,
                tick_lower=req.tick_lower,
                tick_upper=req.tick_upper,
                tick_spacing=req.tick_spacing,
                token0_symbol=req.token0_symbol,
                token1_symbol=req.token1_symbol,
                fee=req.fee,
                liquidity=req.liquidity,
                pool_address=req.pool_address,
            )
        )
    except TokenURIInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return TokenURIResponse(token_uri=result.token_uri)
