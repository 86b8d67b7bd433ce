"""
Concurrency Simulation Script

Fires a burst of concurrent orders at a running API and checks that every
order got its own id and shows up in the order list.
Run from project root: python scripts/simulate.py

Version: 1.0.0
"""

import argparse
import asyncio
import random
import sys
import time
from datetime import datetime
from typing import Any

import httpx

# Configuration
API_BASE_URL = "http://localhost:8000"
TOTAL_ORDERS = 50

# Sample data for random orders
FIRST_NAMES = ["John", "Jane", "Mike", "Sarah", "Tom", "Emma", "David", "Lisa", "Chris", "Amy"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Wilson", "Taylor"]
STREETS = ["Main St", "Broadway", "5th Avenue", "Park Ave", "Madison Ave", "Lexington Ave", "Amsterdam Ave"]
SIZES = ["small", "medium", "large"]
CRUSTS = ["thin", "thick", "stuffed", "gluten-free"]
TOPPINGS = ["pepperoni", "mushrooms", "onions", "sausage", "bacon", "extra cheese", "pineapple"]


def generate_order_payload() -> dict[str, Any]:
    """Generate a random /orders payload."""
    return {
        "size": random.choice(SIZES),
        "crust": random.choice(CRUSTS),
        "toppings": random.sample(TOPPINGS, k=random.randint(0, 3)),
        "customer_name": f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}",
        "delivery_address": f"{random.randint(1, 999)} {random.choice(STREETS)}",
        "phone": f"555-{random.randint(100, 999)}-{random.randint(1000, 9999)}",
    }


async def send_order(
    client: httpx.AsyncClient,
    base_url: str,
    order_num: int
) -> dict[str, Any]:
    """Submit one order and time it."""
    start_time = time.time()

    try:
        response = await client.post(
            f"{base_url}/orders",
            json=generate_order_payload(),
            timeout=30.0
        )
        elapsed = round(time.time() - start_time, 3)

        if response.status_code == 201:
            return {
                "order_num": order_num,
                "success": True,
                "order_id": response.json().get("id"),
                "time": elapsed,
            }
        return {
            "order_num": order_num,
            "success": False,
            "error": response.text[:100],
            "time": elapsed,
        }
    except httpx.HTTPError as e:
        elapsed = round(time.time() - start_time, 3)
        return {
            "order_num": order_num,
            "success": False,
            "error": str(e)[:100],
            "time": elapsed,
        }


async def run_simulation(base_url: str = API_BASE_URL, num_orders: int = TOTAL_ORDERS) -> bool:
    """
    Fire num_orders concurrent submissions, then verify the order list.

    Returns:
        True if every submitted order was stored exactly once
    """
    print("=" * 70)
    print("🔥 CONCURRENCY SIMULATION")
    print("=" * 70)
    print(f"📋 Total Orders: {num_orders}")
    print(f"🎯 Target: {base_url}")
    print(f"⏰ Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)

    start_time = time.time()

    async with httpx.AsyncClient() as client:
        before = await client.get(f"{base_url}/orders")
        before.raise_for_status()
        known_ids = {o["id"] for o in before.json()}

        tasks = [send_order(client, base_url, i + 1) for i in range(num_orders)]
        results = await asyncio.gather(*tasks)

        after = await client.get(f"{base_url}/orders")
        after.raise_for_status()
        listed = [o["id"] for o in after.json() if o["id"] not in known_ids]

    total_time = round(time.time() - start_time, 2)

    successful = [r for r in results if r["success"]]
    failed = [r for r in results if not r["success"]]
    created_ids = [r["order_id"] for r in successful]

    print(f"\n✅ Successful Orders: {len(successful)}/{num_orders}")
    print(f"❌ Failed Orders: {len(failed)}/{num_orders}")
    print(f"⏱️  Total Time: {total_time}s")

    if successful:
        avg_time = round(sum(r["time"] for r in successful) / len(successful), 3)
        print(f"\n📈 Average Response: {avg_time}s")

    if failed:
        print("\n⚠️  Failed Order Details (showing first 5):")
        for f in failed[:5]:
            print(f"   Order #{f['order_num']}: {f.get('error', 'Unknown error')}")

    distinct = len(set(created_ids)) == len(created_ids)
    all_listed = sorted(listed) == sorted(created_ids)

    print("\n" + "=" * 70)
    print("🔍 VERIFICATION")
    print("=" * 70)
    print(f"   {'✅' if distinct else '❌'} Distinct ids: {len(set(created_ids))}/{len(created_ids)}")
    print(f"   {'✅' if all_listed else '❌'} Listed orders: {len(listed)}/{len(created_ids)}")
    print("=" * 70)

    return not failed and distinct and all_listed


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Concurrency Simulation Script")
    parser.add_argument("--url", default=API_BASE_URL, help="API base URL")
    parser.add_argument("--orders", type=int, default=TOTAL_ORDERS, help="Number of orders")
    args = parser.parse_args()

    ok = asyncio.run(run_simulation(args.url, args.orders))
    sys.exit(0 if ok else 1)
