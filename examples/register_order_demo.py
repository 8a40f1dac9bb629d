"""Register an order against the acquiring test environment."""
import asyncio
import os

from sberbank_acquiring import API_URI_TEST, AcquiringClient, AcquiringException, Currency
from sberbank_acquiring.core.logging_config import configure_logging


async def main():
    configure_logging(debug=True)
    async with AcquiringClient(
        user_name=os.environ.get("SBERBANK_DEMO_USER", "test-api"),
        password=os.environ.get("SBERBANK_DEMO_PASSWORD", "test"),
        api_uri=API_URI_TEST,
        currency=Currency.RUB,
        language="en",
    ) as client:
        try:
            result = await client.register_order(
                "demo-order-1",
                10000,
                "https://shop.example/payment/success",
                {"jsonParams": {"email": "buyer@example.com"}},
            )
        except AcquiringException as exc:
            print(f"Gateway call failed: {exc.error_type} {exc.code} {exc}")
            return
        print(f"orderId={result.get('orderId')} formUrl={result.get('formUrl')}")


if __name__ == "__main__":
    asyncio.run(main())
