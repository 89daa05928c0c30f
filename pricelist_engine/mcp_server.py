"""
Pricelist MCP Server

Provides tools for validating, quoting and exporting a MARS compatible
pricelist document passed in as JSON.
"""

import json
import logging
from datetime import date
from typing import Dict, List

from mcp.server import Server
from mcp.types import TextContent, Tool

from pricelist_engine.engine.export import load_document, serialize
from pricelist_engine.engine.quote import quote_booking as _quote_booking
from pricelist_engine.engine.validation import PricelistValidator
from pricelist_engine.errors import PricelistError
from pricelist_engine.models.pricelist import BookingRequest

logger = logging.getLogger(__name__)

app = Server("pricelist")

_DOCUMENT_SCHEMA = {"type": "object", "description": "MARS_COMPATIBLE export document"}


def _result(data):
    return [TextContent(type="text", text=json.dumps(data, indent=2, ensure_ascii=False, default=str))]


@app.list_tools()
async def list_tools() -> List[Tool]:
    return [
        Tool(name="validate_pricelist", description="List blocking issues and overlap warnings of a pricelist",
             inputSchema={"type": "object", "properties": {"document": _DOCUMENT_SCHEMA}, "required": ["document"]}),
        Tool(name="quote_booking", description="Compute sell prices of a booking for every matching base rate",
             inputSchema={"type": "object", "properties": {
                 "document": _DOCUMENT_SCHEMA,
                 "arrival_date": {"type": "string"},
                 "nights": {"type": "integer"},
                 "adults": {"type": "integer"},
                 "child_ages": {"type": "array", "items": {"type": "integer"}},
                 "booked_on": {"type": "string"},
             }, "required": ["document", "arrival_date", "nights", "adults"]}),
        Tool(name="export_pricelist", description="Re-export a pricelist with freshly computed gross prices",
             inputSchema={"type": "object", "properties": {"document": _DOCUMENT_SCHEMA}, "required": ["document"]}),
    ]


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> List[TextContent]:
    handlers = {
        "validate_pricelist": lambda a: validate_pricelist(a["document"]),
        "quote_booking": lambda a: quote_booking(
            a["document"], a["arrival_date"], a["nights"], a["adults"],
            a.get("child_ages", []), a.get("booked_on"),
        ),
        "export_pricelist": lambda a: export_pricelist(a["document"]),
    }
    handler = handlers.get(name)
    if not handler:
        raise ValueError(f"Unknown tool: {name}")
    return _result(handler(arguments))


# --- Implementation ---

def validate_pricelist(document: dict) -> Dict:
    try:
        product, periods, rules = load_document(document)
    except PricelistError as e:
        return {"success": False, "error": str(e)}
    result = PricelistValidator().check(product, periods, rules)
    return {
        "success": True,
        "is_valid": result.is_valid,
        "issues": result.errors,
        "warnings": result.warnings,
    }


def quote_booking(document: dict, arrival_date: str, nights: int, adults: int,
                  child_ages: list = (), booked_on: str = None) -> Dict:
    try:
        product, periods, rules = load_document(document)
        booking = BookingRequest(
            arrival_date=date.fromisoformat(arrival_date),
            nights=int(nights),
            adults=int(adults),
            child_ages=tuple(int(a) for a in child_ages),
            booked_on=date.fromisoformat(booked_on) if booked_on else None,
        )
    except (PricelistError, ValueError, TypeError) as e:
        return {"success": False, "error": str(e)}

    quotes = _quote_booking(product, periods, rules, booking)
    return {
        "success": True,
        "count": len(quotes),
        "data": [
            {
                "period_id": q.period_id,
                "currency": q.currency,
                "base_amount": q.base_amount,
                "supplements_amount": q.supplements_amount,
                "discount_percent": q.discount_percent,
                "discount_amount": q.discount_amount,
                "total": q.total,
                "adjustments": [
                    {"rule_id": a.rule_id, "type": a.kind.value, "title": a.title, "amount": a.amount}
                    for a in q.adjustments
                ],
            }
            for q in quotes
        ],
    }


def export_pricelist(document: dict) -> Dict:
    try:
        product, periods, rules = load_document(document)
    except PricelistError as e:
        return {"success": False, "error": str(e)}
    return {"success": True, "data": serialize(product, periods, rules)}


if __name__ == "__main__":
    import asyncio
    from mcp.server.stdio import stdio_server

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")

    async def run():
        async with stdio_server() as (read, write):
            await app.run(read, write, app.create_initialization_options())

    asyncio.run(run())
