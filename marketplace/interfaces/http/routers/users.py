"""Accounts, login and buyer/seller messaging endpoints."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace.core.security import Identity, create_access_token, get_current_admin, get_current_identity
from marketplace.interfaces.http.deps import get_account_service, get_message_service
from marketplace.modules.accounts import (
    AccountAlreadyExistsError,
    AccountCreateInput,
    AccountNotFoundError,
    AccountPermissionError,
    AccountService,
)
from marketplace.modules.messages import MessageCreateInput, MessageService, NoMessagesError
from marketplace.schemas import (
    AccountResponse,
    LoginRequest,
    LoginResponse,
    MessageCreate,
    MessageResponse,
    MessageSentResponse,
    SignUpRequest,
)

router = APIRouter()


@router.post("/signup", response_model=AccountResponse, status_code=status.HTTP_201_CREATED, summary="Create a new user")
async def sign_up(
    payload: SignUpRequest,
    account_service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    try:
        account = await account_service.create_account(
            AccountCreateInput(
                email=payload.email,
                password=payload.password,
                full_names=payload.full_names,
                phone_no=payload.phone_no,
                location=payload.location,
            )
        )
    except AccountAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered") from exc
    return AccountResponse.model_validate(account)


@router.post("/login", response_model=LoginResponse, summary="Log into user account")
async def login(
    payload: LoginRequest,
    account_service: AccountService = Depends(get_account_service),
) -> LoginResponse:
    account = await account_service.authenticate(payload.email, payload.password)
    if account is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Wrong email or password")

    access_token = create_access_token(account.id, account.role)
    return LoginResponse(access_token=access_token, account_id=account.id, role=account.role)


@router.get("/me", response_model=AccountResponse, summary="Get the current user")
async def current_account(
    identity: Identity = Depends(get_current_identity),
    account_service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    try:
        account = await account_service.get_by_id(identity.subject_id)
    except AccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from exc
    return AccountResponse.model_validate(account)


@router.get("", response_model=List[AccountResponse], summary="List all users (admin)")
async def list_accounts(
    _: Identity = Depends(get_current_admin),
    account_service: AccountService = Depends(get_account_service),
) -> List[AccountResponse]:
    accounts = await account_service.list_accounts()
    return [AccountResponse.model_validate(account) for account in accounts]


@router.get("/getuser/{account_id}", response_model=AccountResponse, summary="Get the user by id")
async def get_account(
    account_id: str,
    _: Identity = Depends(get_current_identity),
    account_service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    try:
        account = await account_service.get_by_id(account_id)
    except AccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from exc
    return AccountResponse.model_validate(account)


@router.delete("/userdelete/{account_id}", response_model=AccountResponse, summary="Delete the user by id")
async def delete_account(
    account_id: str,
    identity: Identity = Depends(get_current_identity),
    account_service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    try:
        account = await account_service.delete_account(account_id, identity)
    except AccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from exc
    except AccountPermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return AccountResponse.model_validate(account)


@router.post(
    "/sendMessage",
    response_model=MessageSentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send a message about a product",
)
async def send_message(
    payload: MessageCreate,
    message_service: MessageService = Depends(get_message_service),
) -> MessageSentResponse:
    message = await message_service.send_message(
        MessageCreateInput(message=payload.message, product_id=payload.product_id)
    )
    return MessageSentResponse(
        status="A new message sent successfully",
        message=MessageResponse.model_validate(message),
    )


@router.get("/getMessages", response_model=List[MessageResponse], summary="Returns all messages")
async def list_messages(message_service: MessageService = Depends(get_message_service)) -> List[MessageResponse]:
    try:
        messages = await message_service.list_messages()
    except NoMessagesError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return [MessageResponse.model_validate(message) for message in messages]
