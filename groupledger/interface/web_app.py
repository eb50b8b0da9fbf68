"""Mini README: FastAPI adapter exposing the ledger session over JSON.

Structure:
    * create_application - application factory wiring routes to a session.
    * Request models - Pydantic bodies for participants, expenses, payments.

The adapter holds no logic of its own: each route forwards to
``LedgerSession`` and translates engine errors into HTTP status codes
(400 for invalid input, 404 for unknown participants, 409 when the ledger
does not reconcile). Handlers are ``async`` so every mutation runs on the
event loop one at a time.
"""

from __future__ import annotations

from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..errors import InvalidAmount, InvalidParticipantName, UnknownParticipant
from ..logging_utils import get_logger
from ..session import LedgerSession

LOGGER = get_logger(__name__)


class ParticipantIn(BaseModel):
    name: str = Field(..., description="Display name of the new participant.")


class ExpenseIn(BaseModel):
    name: str = Field("", description="Label of the item.")
    amount: Union[str, float] = Field(..., description="Amount as typed by the user.")


class PaymentIn(BaseModel):
    amount: Union[str, float] = Field(..., description="Amount as typed by the user.")


def create_application(session: Optional[LedgerSession] = None) -> FastAPI:
    """Create the FastAPI application bound to ``session`` (or a fresh one)."""

    app = FastAPI(title="Group Ledger", version="0.1.0")
    ledger_session = session if session is not None else LedgerSession()
    app.state.session = ledger_session

    @app.get("/participants")
    async def list_participants() -> JSONResponse:
        """Return every participant with their display balance."""

        rows = ledger_session.summary()
        LOGGER.debug("Returning %s participants", len(rows))
        return JSONResponse({"participants": rows})

    @app.post("/participants", status_code=201)
    async def add_participant(payload: ParticipantIn) -> JSONResponse:
        try:
            participant_id = ledger_session.add_participant(payload.name)
        except InvalidParticipantName as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse({"participant_id": participant_id}, status_code=201)

    @app.get("/participants/{participant_id}")
    async def get_participant(participant_id: str) -> JSONResponse:
        try:
            participant = ledger_session.ledger.get_participant(participant_id)
            balance = ledger_session.get_display_balance(participant_id)
        except UnknownParticipant as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse({**participant.as_dict(), "balance": balance})

    @app.post("/participants/{participant_id}/expenses", status_code=201)
    async def add_expense(participant_id: str, payload: ExpenseIn) -> JSONResponse:
        """Append an expense, rejecting amounts that do not parse."""

        try:
            ledger_session.add_expense(participant_id, payload.name, payload.amount)
        except UnknownParticipant as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except InvalidAmount as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(
            {"balance": ledger_session.get_display_balance(participant_id)}, status_code=201
        )

    @app.post("/participants/{participant_id}/payments", status_code=201)
    async def add_payment(participant_id: str, payload: PaymentIn) -> JSONResponse:
        """Append a payment, rejecting amounts that do not parse."""

        try:
            ledger_session.add_payment(participant_id, payload.amount)
        except UnknownParticipant as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except InvalidAmount as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(
            {"balance": ledger_session.get_display_balance(participant_id)}, status_code=201
        )

    @app.delete("/participants/{participant_id}", status_code=204)
    async def remove_participant(participant_id: str) -> None:
        ledger_session.remove_participant(participant_id)

    @app.get("/settlement")
    async def settlement() -> JSONResponse:
        """Return the transfers settling the group, or 409 when imbalanced."""

        result = ledger_session.compute_settlement()
        if not result.ok:
            return JSONResponse(result.as_dict(), status_code=409)
        return JSONResponse(result.as_dict())

    return app
