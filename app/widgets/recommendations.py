"""
추천 검색 위젯
검색어 하나를 보내고 표시 중인 상품 목록을 응답으로 교체합니다.
"""
from typing import List, Optional

from pydantic import ValidationError

from app.models.product import ProductSummary
from app.widgets.base import ApiWidget, WidgetRequestError

EMPTY_STATE = "No products found. Try a different search query."


class RecommendationWidget(ApiWidget):
    """AI 상품 추천 검색 위젯"""

    endpoint = "/ai/gpt/recommendations"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.products: List[ProductSummary] = []
        self.searched = False

    @property
    def empty_message(self) -> Optional[str]:
        """검색 후 결과가 없을 때 표시할 문구"""
        if self.searched and not self.loading and not self.products:
            return EMPTY_STATE
        return None

    async def search(self, query: str) -> List[ProductSummary]:
        """
        추천 검색

        결과 0개는 안내(info) 알림, 호출 실패는 에러 알림으로 구분합니다.
        실패 시 기존 상품 목록은 유지합니다.
        """
        if not query.strip():
            self.notify("error", "Please enter what you're looking for")
            return self.products

        self.loading = True
        self.searched = True

        try:
            data = await self._post(self.endpoint, {"query": query})
            items = data.get("products")
            if not isinstance(items, list):
                raise WidgetRequestError("응답에 products 필드가 없습니다")
            products = [ProductSummary(**item) for item in items]
        except ValidationError:
            self.notify("error", "Failed to get recommendations")
            return self.products
        except WidgetRequestError as e:
            self.notify("error", e.error or "Failed to get recommendations")
            return self.products
        finally:
            self.loading = False

        self.products = products
        if not products:
            self.notify("info", "No products found matching your query")
        else:
            self.notify("success", f"Found {len(products)} recommendations")

        return self.products
