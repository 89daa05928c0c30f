"""Fiyat AI asistanı - AWS Bedrock üzerinden serbest metin öneri.

Asistanın çıktısı yapısal bir garanti taşımaz; motor onu yalnızca
operatöre gösterilecek metin olarak ele alır.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Optional

import boto3
from botocore.exceptions import ClientError

from pricelist_engine.engine.gross_price import format_gross_price
from pricelist_engine.models.pricelist import AdjustmentRule, PricePeriod, Product, Supplement

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are the Price AI Assistant of a travel back-office. "
    "You help operators maintain hotel price lists (base rates, supplements, discounts). "
    "Answer professionally and propose concrete rule changes where useful."
)


def summarize_rule_set(
    product: Product,
    periods: Iterable[PricePeriod],
    rules: Iterable[AdjustmentRule] = (),
) -> dict:
    """Asistana gönderilecek kısa kural seti özeti."""
    return {
        "product": product.name or product.type,
        "currency": product.currency,
        "periods": [
            {
                "from": p.date_from,
                "to": p.date_to,
                "basis": p.basis.value,
                "net": p.net_price,
                "gross": format_gross_price(p.net_price, p.provision_percent),
                "release_days": p.release_days,
                "min_stay": p.min_stay,
                "arrival_days": list(p.arrival_days),
            }
            for p in periods
        ],
        "rules": [
            {
                "type": r.kind.value,
                "title": r.title,
                **(
                    {"gross": format_gross_price(r.net_price, r.provision_percent)}
                    if isinstance(r, Supplement)
                    else {"percent": r.percent_value, "days_before_arrival": r.days_before_arrival}
                ),
            }
            for r in rules
        ],
    }


class PricingAssistant:
    """Bedrock Nova modeline doğal dil talimatı + kural özeti gönderir."""

    def __init__(
        self,
        model_id: str = "us.amazon.nova-pro-v1:0",
        region_name: str = "us-west-2",
        bedrock_runtime_client: Optional[Any] = None,
    ):
        self.model_id = model_id
        # dependency injection destekli
        self.bedrock_runtime = bedrock_runtime_client or boto3.client(
            "bedrock-runtime", region_name=region_name
        )

    def build_prompt(self, instruction: str, summary: dict) -> str:
        return (
            f"{SYSTEM_PROMPT}\n\n"
            f"Operator says: \"{instruction}\"\n"
            f"Current price list: {json.dumps(summary, ensure_ascii=False)}"
        )

    def invoke_model(self, prompt: str, max_tokens: int = 1000, temperature: float = 0.7) -> str:
        """Bedrock Nova modelini çağırır (inference profile kullanarak)."""
        try:
            response = self.bedrock_runtime.invoke_model(
                modelId=self.model_id,
                contentType="application/json",
                accept="application/json",
                body=json.dumps(
                    {
                        "messages": [{"role": "user", "content": [{"text": prompt}]}],
                        "inferenceConfig": {
                            "max_new_tokens": max_tokens,
                            "temperature": temperature,
                        },
                    }
                ),
            )
            result = json.loads(response["body"].read())
            return result.get("output", {}).get("message", {}).get("content", [{}])[0].get("text", "")
        except ClientError as e:
            logger.error("Bedrock API hatası [PricingAssistant]: %s", e)
            raise

    def suggest(self, instruction: str, summary: dict) -> str:
        if not instruction.strip():
            return ""
        logger.info("Asistan talebi: %s", instruction[:80])
        return self.invoke_model(self.build_prompt(instruction, summary))
