"""
Checkout orchestration.

    VALIDATING   cart not empty, every line fresh and in stock
    PRICING      subtotal + flat shipping
    AUTHORIZING  balance covers the total
    SHIPPING     shipment notice (log only)
    SETTLING     saga: charge customer → deduct stock per line
    DONE         clear cart

Everything before SETTLING is read-only. SETTLING runs as a saga, so a
failure there refunds the charge and restocks deducted lines before the
rejection is returned. The caller always sees all-or-nothing.
"""

from __future__ import annotations

import logging
from datetime import datetime

from tally import saga as S
from tally._types import Result, Ok, Error, Money, Clock, utcnow
from tally.account import Customer
from tally.cart import Cart, CartLine
from tally.errors import (
    CheckoutError,
    EmptyCartError,
    ExpiredItemError,
    InsufficientStockError,
    InsufficientFundsError,
    PaymentInvariantError,
)
from tally.shipping import ShippingCalculator, ShippableUnit, expand_units, render_notice
from tally.checkout._types import CheckoutStage, Rejection, Receipt, ReceiptLine
from tally.checkout._render import render_receipt

logger = logging.getLogger(__name__)


class CheckoutOrchestrator:
    """
    Runs one checkout per ``run`` call; keeps no per-call state.

    Example:
        orchestrator = CheckoutOrchestrator(ShippingCalculator(fee=30.0))

        match orchestrator.run(customer, cart):
            case Ok(receipt):
                print(receipt.total)
            case Error(rejection):
                print(rejection.stage, rejection.error)
    """

    def __init__(
        self,
        calculator: ShippingCalculator | None = None,
        clock: Clock = utcnow,
        policy: S.policy.CompensationPolicy = S.policy.compensate.all_on_failure(),
    ) -> None:
        self.calculator = calculator or ShippingCalculator()
        self.clock = clock
        self.policy = policy

    def run(self, customer: Customer, cart: Cart) -> Result[Receipt, Rejection]:
        now = self.clock()
        lines = cart.lines()

        self._enter(CheckoutStage.VALIDATING)
        match self._validate(lines, now):
            case Error(e):
                return self._reject(CheckoutStage.VALIDATING, e)
            case Ok(units):
                pass

        self._enter(CheckoutStage.PRICING)
        subtotal = cart.subtotal()
        shipping_fee = self.calculator.compute_fee(units)
        total = subtotal + shipping_fee

        self._enter(CheckoutStage.AUTHORIZING)
        if not customer.can_afford(total):
            return self._reject(
                CheckoutStage.AUTHORIZING,
                InsufficientFundsError(required=total, available=customer.balance),
            )

        self._enter(CheckoutStage.SHIPPING)
        notice = None
        if units:
            notice = self.calculator.build_notice(units)
            for text in render_notice(notice):
                logger.info(text)

        self._enter(CheckoutStage.SETTLING)
        match self._settle(customer, lines, total):
            case Error(saga_error):
                if not saga_error.rollback_complete:
                    logger.error(
                        "Settlement rollback incomplete: %d compensator(s) failed",
                        saga_error.compensators_failed,
                    )
                return self._reject(CheckoutStage.SETTLING, saga_error.error)
            case Ok(_):
                pass

        self._enter(CheckoutStage.DONE)
        cart.clear()

        receipt = Receipt(
            customer=customer.name,
            lines=tuple(
                ReceiptLine(line.item.name, line.quantity, line.item.unit_price, line.line_total)
                for line in lines
            ),
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            total=total,
            balance_after=customer.balance,
            notice=notice,
        )
        for text in render_receipt(receipt):
            logger.info(text)
        return Ok(receipt)

    # ─────────────────────────────────────────────────────────────────────────
    # Stages
    # ─────────────────────────────────────────────────────────────────────────

    def _validate(
        self,
        lines: list[CartLine],
        now: datetime,
    ) -> Result[list[ShippableUnit], CheckoutError]:
        """Re-check every line; time or other checkouts may have moved on since add."""
        if not lines:
            return Error(EmptyCartError())

        for line in lines:
            item = line.item
            if item.is_expired(now):
                return Error(ExpiredItemError(item.name))
            if line.quantity > item.available_quantity:
                return Error(InsufficientStockError(item.name, item.available_quantity, line.quantity))

        return Ok(expand_units(lines))

    def _settle(
        self,
        customer: Customer,
        lines: list[CartLine],
        total: Money,
    ) -> Result[S.SagaResult[tuple[object, ...]], S.SagaError[CheckoutError]]:
        charge = S.step(
            action=lambda: _charge(customer, total),
            compensate=customer.refund,
        )
        deductions = [
            S.step(
                action=lambda line=line: _deduct(line),
                compensate=lambda line: line.item.restock(line.quantity),
            )
            for line in lines
        ]
        return S.run_sequence(S.sequence(charge, *deductions), policy=self.policy)  # type: ignore[arg-type]

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _enter(stage: CheckoutStage) -> None:
        logger.debug("Checkout stage %s", stage.name, extra={"stage": stage.name})

    def _reject(self, stage: CheckoutStage, error: CheckoutError) -> Error[Rejection]:
        logger.warning(
            "Checkout rejected at %s: %s", stage.name, error,
            extra={"stage": stage.name, "code": error.code},
        )
        self._enter(CheckoutStage.REJECTED)
        return Error(Rejection(stage=stage, error=error))


def _charge(customer: Customer, total: Money) -> Result[Money, CheckoutError]:
    if customer.pay(total):
        return Ok(total)
    return Error(PaymentInvariantError(amount=total, balance=customer.balance))


def _deduct(line: CartLine) -> Result[CartLine, CheckoutError]:
    item = line.item
    if line.quantity > item.available_quantity:
        return Error(InsufficientStockError(item.name, item.available_quantity, line.quantity))
    item.reduce_quantity(line.quantity)
    return Ok(line)


__all__ = ("CheckoutOrchestrator",)
