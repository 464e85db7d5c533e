"""Mobile-money payment endpoints.

``router`` carries the purchase flow. ``admin_router`` exposes provider
withdrawals and introspection and is only mounted when
``paypack.admin_routes_enabled`` is set.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from marketplace.core.security import Identity, get_current_admin, get_current_identity
from marketplace.interfaces.http.deps import get_payment_admin_service, get_settlement_coordinator
from marketplace.modules.payments import (
    GatewayError,
    GatewayRejectedError,
    PaymentAdminService,
    SettlementCoordinator,
)
from marketplace.modules.products import ProductNotFoundError
from marketplace.schemas import PaymentRequest, PaymentResponse, ProviderDataResponse, WithdrawRequest


router = APIRouter()
admin_router = APIRouter()

DECLINED_DETAIL = "Payment request was declined, please check the phone number and balance"


def _gateway_http_error(exc: GatewayError) -> HTTPException:
    if isinstance(exc, GatewayRejectedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=DECLINED_DETAIL)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Payment provider is currently unavailable, please try again later",
    )


@router.post("/pay/{product_id}", response_model=PaymentResponse, summary="Make payment for purchasing product")
async def pay_for_product(
    product_id: str,
    payload: PaymentRequest,
    identity: Identity = Depends(get_current_identity),
    coordinator: SettlementCoordinator = Depends(get_settlement_coordinator),
) -> PaymentResponse:
    try:
        receipt = await coordinator.initiate_purchase(product_id, payload.number, identity)
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except GatewayError as exc:
        raise _gateway_http_error(exc) from exc
    return PaymentResponse.model_validate(receipt.to_payload())


@admin_router.post("/withdraw", response_model=ProviderDataResponse, summary="Withdraw funds to a phone number")
async def withdraw(
    payload: WithdrawRequest,
    admin: Identity = Depends(get_current_admin),
    service: PaymentAdminService = Depends(get_payment_admin_service),
) -> ProviderDataResponse:
    try:
        response = await service.withdraw(payload.number, payload.amount, admin)
    except GatewayError as exc:
        raise _gateway_http_error(exc) from exc
    return ProviderDataResponse(status="withdrawal submitted", data=response.data)


@admin_router.get("/transactions", response_model=ProviderDataResponse, summary="List provider transactions")
async def account_transactions(
    offset: int = Query(default=0, ge=0),
    limit: int | None = Query(default=None, gt=0, le=500),
    admin: Identity = Depends(get_current_admin),
    service: PaymentAdminService = Depends(get_payment_admin_service),
) -> ProviderDataResponse:
    try:
        response = await service.transactions(admin, offset=offset, limit=limit)
    except GatewayError as exc:
        raise _gateway_http_error(exc) from exc
    return ProviderDataResponse(status="successful transactions", data=response.data)


@admin_router.get("/events", response_model=ProviderDataResponse, summary="List provider events")
async def account_events(
    offset: int = Query(default=0, ge=0),
    limit: int | None = Query(default=None, gt=0, le=500),
    admin: Identity = Depends(get_current_admin),
    service: PaymentAdminService = Depends(get_payment_admin_service),
) -> ProviderDataResponse:
    try:
        response = await service.events(admin, offset=offset, limit=limit)
    except GatewayError as exc:
        raise _gateway_http_error(exc) from exc
    return ProviderDataResponse(status="successful events", data=response.data)


@admin_router.get("/account", response_model=ProviderDataResponse, summary="Provider account information")
async def account_info(
    admin: Identity = Depends(get_current_admin),
    service: PaymentAdminService = Depends(get_payment_admin_service),
) -> ProviderDataResponse:
    try:
        response = await service.account(admin)
    except GatewayError as exc:
        raise _gateway_http_error(exc) from exc
    return ProviderDataResponse(status="successful account info", data=response.data)
