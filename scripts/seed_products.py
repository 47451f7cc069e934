#!/usr/bin/env python3
"""
개발용 상품 카탈로그 시드 스크립트
(먼저 alembic upgrade head 로 테이블을 생성해야 합니다)

사용법:
    python scripts/seed_products.py [옵션]

옵션:
    --file, -f      상품 JSON 파일 (name, category, price, description, image 목록)
    --clear         기존 상품 삭제 후 삽입

예시:
    python scripts/seed_products.py
    python scripts/seed_products.py -f ./products.json --clear
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

SAMPLE_PRODUCTS = [
    {
        "name": "Wool Scarf",
        "category": "Accessories",
        "price": 39.99,
        "description": "Soft merino wool scarf that keeps you warm through winter.",
        "image": "https://cdn.example.com/products/wool-scarf.jpg",
    },
    {
        "name": "Red Scarf",
        "category": "Accessories",
        "price": 24.5,
        "description": "Lightweight knitted scarf in a bright red colour.",
        "image": "https://cdn.example.com/products/red-scarf.jpg",
    },
    {
        "name": "Blue Hat",
        "category": "Accessories",
        "price": 19,
        "description": "Classic beanie in navy blue.",
        "image": "https://cdn.example.com/products/blue-hat.jpg",
    },
    {
        "name": "Leather Jacket",
        "category": "Jackets",
        "price": 249,
        "description": "Black leather biker jacket with a quilted lining.",
        "image": "https://cdn.example.com/products/leather-jacket.jpg",
    },
    {
        "name": "Linen Suit",
        "category": "Suits",
        "price": 320,
        "description": "Elegant beige linen suit for summer formal wear.",
        "image": "https://cdn.example.com/products/linen-suit.jpg",
    },
]


async def seed(products: list, clear: bool) -> int:
    """상품 삽입 후 삽입 개수 반환"""
    from sqlalchemy import delete

    from app.database import async_session_factory, close_db
    from app.models.product import Product

    async with async_session_factory() as session:
        if clear:
            await session.execute(delete(Product))
        session.add_all(Product(**item) for item in products)
        await session.commit()
    await close_db()
    return len(products)


def main():
    parser = argparse.ArgumentParser(
        description="Storefront 상품 카탈로그 시드",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--file", "-f", type=Path, help="상품 JSON 파일")
    parser.add_argument("--clear", action="store_true", help="기존 상품 삭제")
    args = parser.parse_args()

    products = SAMPLE_PRODUCTS
    if args.file:
        products = json.loads(args.file.read_text(encoding="utf-8"))

    count = asyncio.run(seed(products, args.clear))
    print(f"✅ 상품 {count}개 등록 완료")


if __name__ == "__main__":
    main()
