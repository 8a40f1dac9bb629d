"""
Order status codes returned by getOrderStatusExtended.do (`orderStatus` field).
"""
from __future__ import annotations

from enum import IntEnum


class OrderStatus(IntEnum):
    REGISTERED = 0
    PRE_AUTHORIZED = 1
    DEPOSITED = 2
    REVERSED = 3
    REFUNDED = 4
    ACS_AUTH_INITIATED = 5
    DECLINED = 6


ORDER_STATUS_DESCRIPTIONS = {
    OrderStatus.REGISTERED: "Order registered but not paid",
    OrderStatus.PRE_AUTHORIZED: "Order amount pre-authorized (two-step payment)",
    OrderStatus.DEPOSITED: "Order amount fully authorized",
    OrderStatus.REVERSED: "Authorization reversed",
    OrderStatus.REFUNDED: "Refund performed",
    OrderStatus.ACS_AUTH_INITIATED: "Authorization via issuer ACS initiated",
    OrderStatus.DECLINED: "Authorization declined",
}
