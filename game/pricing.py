"""
Silicon Wars - Price Recommendation Module

Turns test-lab price/value scores into price suggestions. Suggestions are
only stored; a model's price changes only after the player adopts one.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from config import (
    PRICE_VALUE_STEEP_CUT_BELOW, PRICE_VALUE_CUT_BELOW, PRICE_VALUE_RAISE_ABOVE,
    PRICE_STEEP_CUT, PRICE_CUT, PRICE_RAISE, EXPECTED_PRICE_BANDS,
)
from scoring import Segment, round_half_up

logger = logging.getLogger(__name__)


@dataclass
class PriceRecommendation:
    model_id: str
    original_price: float
    recommended_price: float
    reasoning: str
    test_score: float
    generated_at: float = field(default_factory=time.time)
    adopted: bool = False

    def to_dict(self) -> dict:
        return {
            "modelId": self.model_id,
            "originalPrice": self.original_price,
            "recommendedPrice": self.recommended_price,
            "reasoning": self.reasoning,
            "testScore": self.test_score,
            "generatedAt": self.generated_at,
            "adopted": self.adopted,
        }


class PriceRecommendationBook:
    """
    Pending price recommendations for one game session.

    Owned by the caller; create one per game.
    """

    def __init__(self):
        self.recommendations: Dict[str, PriceRecommendation] = {}

    def store(
        self,
        model_id: str,
        original_price: float,
        recommended_price: float,
        reasoning: str,
        test_score: float
    ) -> PriceRecommendation:
        recommendation = PriceRecommendation(
            model_id=model_id,
            original_price=original_price,
            recommended_price=recommended_price,
            reasoning=reasoning,
            test_score=test_score,
        )
        self.recommendations[model_id] = recommendation
        return recommendation

    def get(self, model_id: str) -> Optional[PriceRecommendation]:
        return self.recommendations.get(model_id)

    def adopt(self, model_id: str) -> Dict:
        """Mark a recommendation as adopted. Returns the new price."""
        recommendation = self.recommendations.get(model_id)
        if not recommendation:
            return {"new_price": 0, "success": False}

        recommendation.adopted = True
        logger.info(f"Price recommendation adopted for {model_id}: {recommendation.recommended_price}")
        return {"new_price": recommendation.recommended_price, "success": True}

    def reject(self, model_id: str) -> bool:
        """Drop a recommendation, keeping the original price"""
        if model_id not in self.recommendations:
            return False
        del self.recommendations[model_id]
        return True

    def has_pending(self, model_id: str) -> bool:
        recommendation = self.recommendations.get(model_id)
        return recommendation is not None and not recommendation.adopted

    def pending(self) -> List[PriceRecommendation]:
        return [r for r in self.recommendations.values() if not r.adopted]

    def clear(self):
        """Forget everything (new game)"""
        self.recommendations.clear()

    def apply_if_adopted(self, model: Dict) -> Dict:
        """
        Return a copy of the model with the recommended price, but only if the
        player adopted it. Otherwise the model comes back unchanged.
        """
        recommendation = self.recommendations.get(model.get("id"))
        if not recommendation or not recommendation.adopted:
            return model

        updated = dict(model)
        updated["price"] = recommendation.recommended_price
        updated["price_history"] = list(model.get("price_history", [])) + [{
            "old_price": recommendation.original_price,
            "new_price": recommendation.recommended_price,
            "reason": "Test recommendation adopted",
            "timestamp": time.time(),
        }]
        return updated

    def display(self, model_id: str) -> Dict:
        """What the pricing panel shows for a model"""
        recommendation = self.recommendations.get(model_id)
        if not recommendation or recommendation.adopted:
            return {
                "show": False,
                "current": 0,
                "recommended": 0,
                "reasoning": "",
                "can_adopt": False,
                "can_reject": False,
            }

        return {
            "show": True,
            "current": recommendation.original_price,
            "recommended": recommendation.recommended_price,
            "reasoning": recommendation.reasoning,
            "can_adopt": True,
            "can_reject": True,
        }


def generate_price_recommendation(
    model_id: str,
    current_price: float,
    gaming_value: float,
    business_value: float,
    workstation_value: float,
    book: Optional[PriceRecommendationBook] = None
) -> Dict:
    """
    Suggest a price change from the three segment price/value scores.

    A suggestion is made only when the average value is clearly off. When a
    book is passed the suggestion is stored there; nothing is applied.
    """
    average = (gaming_value + business_value + workstation_value) / 3

    if average < PRICE_VALUE_CUT_BELOW:
        if average < PRICE_VALUE_STEEP_CUT_BELOW:
            adjustment = PRICE_STEEP_CUT
            reasoning = ("The price is far too high for the performance offered. "
                         "A 20% cut would improve market chances considerably.")
        else:
            adjustment = PRICE_CUT
            reasoning = ("The price is above the sweet spot. "
                         "A moderate 10% cut is advisable.")
    elif average > PRICE_VALUE_RAISE_ABOVE:
        adjustment = PRICE_RAISE
        reasoning = ("Excellent value for money allows a 15% price increase "
                     "without losing sales.")
    else:
        return {
            "current_price": current_price,
            "recommended_price": current_price,
            "reasoning": "The current price is in the optimal range for the performance offered.",
            "has_recommendation": False,
        }

    recommended = round_half_up(current_price + current_price * adjustment)
    if book is not None:
        book.store(model_id, current_price, recommended, reasoning, average)

    return {
        "current_price": current_price,
        "recommended_price": recommended,
        "reasoning": reasoning,
        "has_recommendation": True,
    }


# =============================================================================
# PRICE / VALUE
# =============================================================================

def get_expected_price(segment: Segment, year: int) -> Optional[int]:
    """What a segment expects to pay in a year, or None before its market exists"""
    base, per_year, first_year = EXPECTED_PRICE_BANDS[Segment(segment).value]
    if year < first_year:
        return None
    return base + (year - first_year) * per_year


def calculate_price_value(actual_price: float, expected_price: float) -> float:
    """100 at the expected price, dropping by the relative deviation, clamped to 0-100"""
    deviation = abs(actual_price - expected_price) / expected_price * 100
    return max(0.0, min(100.0, 100 - deviation))


def calculate_segment_price_values(price: float, year: int) -> Dict[str, float]:
    """
    Price/value score of a model price for each segment.

    A segment whose market does not exist yet scores 0.
    """
    values = {}
    for segment in Segment:
        expected = get_expected_price(segment, year)
        values[segment.value] = 0.0 if expected is None else calculate_price_value(price, expected)
    return values


def recommend_price_for_model(
    model_id: str,
    price: float,
    year: int,
    book: Optional[PriceRecommendationBook] = None
) -> Dict:
    """Price recommendation for a model sold at `price` in `year`"""
    values = calculate_segment_price_values(price, year)
    result = generate_price_recommendation(
        model_id,
        price,
        values[Segment.GAMING.value],
        values[Segment.BUSINESS.value],
        values[Segment.WORKSTATION.value],
        book,
    )
    result["price_values"] = values
    return result
