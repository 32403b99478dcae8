"""
REST API routes for Silicon Wars.

Thin JSON layer over the hardware catalog and the test lab. This layer is a
caller of the core, so it is the one that validates years and quarters.
"""

import logging
from flask import Blueprint, request, jsonify

from config import VALID_QUARTERS, START_YEAR
from hardware import CustomChip, HardwareType, calculate_model_cost
from availability import (
    get_available_components, get_available_hardware,
    get_available_hardware_by_type, get_newly_available_hardware,
)
from scoring import Configuration, Segment, evaluate_configuration
from aging import calculate_bom_cost_with_decay
from pricing import generate_price_recommendation, recommend_price_for_model

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__, url_prefix='/api')

COMPONENT_SLOTS = ('cpu', 'gpu', 'ram', 'sound')


def parse_int(value, key):
    """Whole numbers only: JSON ints, integral floats or digit strings"""
    if isinstance(value, bool):
        raise ValueError(f"'{key}' must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"'{key}' must be an integer")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{key}' must be an integer")


def parse_number(value, key):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number")
    return value


def parse_time(source, year_key='year', quarter_key='quarter'):
    """Read and validate a (year, quarter) pair. Raises ValueError."""
    year = parse_int(source.get(year_key), year_key)
    quarter = parse_int(source.get(quarter_key), quarter_key)

    if quarter not in VALID_QUARTERS:
        raise ValueError(f"'{quarter_key}' must be 1-4")
    if year < START_YEAR:
        raise ValueError(f"'{year_key}' must be {START_YEAR} or later")
    return year, quarter


def parse_model(data):
    """
    Check the shape of a model body before it reaches the cost and scoring
    code. Raises ValueError.
    """
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    missing = [slot for slot in COMPONENT_SLOTS if not data.get(slot)]
    if missing:
        raise ValueError(f"Missing required fields: {', '.join(missing)}")
    for slot in COMPONENT_SLOTS:
        if not isinstance(data[slot], str):
            raise ValueError(f"'{slot}' must be a component name")

    accessories = data.get('accessories')
    if accessories is not None:
        if not isinstance(accessories, list) or not all(isinstance(a, str) for a in accessories):
            raise ValueError("'accessories' must be a list of names")

    case = data.get('case')
    if case is not None:
        if not isinstance(case, dict):
            raise ValueError("'case' must be an object")
        if case.get('price') is not None:
            parse_number(case['price'], 'case.price')
        if case.get('quality') is not None:
            parse_case_quality(case['quality'], 'case.quality')

    for key in ('caseQuality', 'case_quality'):
        if data.get(key) is not None:
            parse_case_quality(data[key], key)
    return data


def parse_case_quality(value, key):
    quality = parse_number(value, key)
    if not 0 <= quality <= 100:
        raise ValueError(f"'{key}' must be between 0 and 100")
    return quality


def parse_type(value):
    if value is None:
        return None
    try:
        return HardwareType(value)
    except ValueError:
        raise ValueError(f"Unknown hardware type '{value}'")


def parse_segment(value):
    try:
        return Segment(value or Segment.BUSINESS.value)
    except ValueError:
        raise ValueError(f"Unknown segment '{value}'")


def parse_custom_chips(items):
    try:
        return [CustomChip.from_dict(item) for item in items or []]
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid custom chip: {e}")


def error(message, status):
    return jsonify({'error': message}), status


# ==================== Health Check ====================

@api.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'})


# ==================== Hardware Catalog ====================

@api.route('/hardware', methods=['GET'])
def list_hardware():
    try:
        year, quarter = parse_time(request.args)
        hw_type = parse_type(request.args.get('type'))
        components = get_available_components(year, quarter)
        if hw_type:
            components = [c for c in components if c.type == hw_type]
        return jsonify([c.to_dict() for c in components])
    except ValueError as e:
        return error(str(e), 400)
    except Exception as e:
        logger.error(f"List hardware error: {e}")
        return error('Failed to list hardware', 500)


def _available(year, quarter, hw_type, custom_chips):
    if hw_type:
        components = get_available_hardware_by_type(hw_type, year, quarter, custom_chips)
    else:
        components = get_available_hardware(year, quarter, custom_chips)
    return jsonify([c.to_dict() for c in components])


@api.route('/hardware/available', methods=['GET'])
def available_hardware():
    try:
        year, quarter = parse_time(request.args)
        return _available(year, quarter, parse_type(request.args.get('type')), [])
    except ValueError as e:
        return error(str(e), 400)
    except Exception as e:
        logger.error(f"Available hardware error: {e}")
        return error('Failed to list available hardware', 500)


@api.route('/hardware/available', methods=['POST'])
def available_hardware_with_chips():
    try:
        data = request.get_json(silent=True) or {}
        year, quarter = parse_time(data)
        custom_chips = parse_custom_chips(data.get('customChips'))
        return _available(year, quarter, parse_type(data.get('type')), custom_chips)
    except ValueError as e:
        return error(str(e), 400)
    except Exception as e:
        logger.error(f"Available hardware error: {e}")
        return error('Failed to list available hardware', 500)


@api.route('/hardware/new', methods=['GET'])
def new_hardware():
    try:
        previous_year, previous_quarter = parse_time(request.args, 'prevYear', 'prevQuarter')
        year, quarter = parse_time(request.args)
        components = get_newly_available_hardware(previous_year, previous_quarter, year, quarter)
        return jsonify([c.to_dict() for c in components])
    except ValueError as e:
        return error(str(e), 400)
    except Exception as e:
        logger.error(f"New hardware error: {e}")
        return error('Failed to list new hardware', 500)


# ==================== Models ====================

@api.route('/models/cost', methods=['POST'])
def model_cost():
    try:
        data = parse_model(request.get_json(silent=True) or {})
        result = {'cost': calculate_model_cost(data)}
        if data.get('year') is not None or data.get('quarter') is not None:
            year, quarter = parse_time(data)
            result['decayedCost'] = calculate_bom_cost_with_decay(data, year, quarter)
        return jsonify(result)
    except ValueError as e:
        return error(str(e), 400)
    except Exception as e:
        logger.error(f"Model cost error: {e}")
        return error('Failed to calculate model cost', 500)


# ==================== Test Lab ====================

@api.route('/scoring/evaluate', methods=['POST'])
def evaluate():
    try:
        data = parse_model(request.get_json(silent=True) or {})
        segment = parse_segment(data.get('segment'))
        report = evaluate_configuration(Configuration.from_dict(data), segment)
        return jsonify(report.to_dict())
    except ValueError as e:
        return error(str(e), 400)
    except Exception as e:
        logger.error(f"Evaluate configuration error: {e}")
        return error('Failed to evaluate configuration', 500)


@api.route('/pricing/recommendation', methods=['POST'])
def price_recommendation():
    """
    Either pass the three price/value scores, or a year and let the
    scores be derived from the segments' expected prices.
    """
    try:
        data = request.get_json(silent=True) or {}
        value_keys = ('gamingValue', 'businessValue', 'workstationValue')
        required = ('modelId', 'currentPrice')
        if data.get('year') is None:
            required += value_keys
        missing = [key for key in required if data.get(key) is None]
        if missing:
            return error(f"Missing required fields: {', '.join(missing)}", 400)

        model_id = str(data['modelId'])
        current_price = parse_number(data['currentPrice'], 'currentPrice')
        if data.get('year') is not None:
            year = parse_int(data['year'], 'year')
            if year < START_YEAR:
                raise ValueError(f"'year' must be {START_YEAR} or later")
            result = recommend_price_for_model(model_id, current_price, year)
        else:
            gaming, business, workstation = (parse_number(data[key], key) for key in value_keys)
            result = generate_price_recommendation(model_id, current_price, gaming, business, workstation)

        response = {
            'currentPrice': result['current_price'],
            'recommendedPrice': result['recommended_price'],
            'reasoning': result['reasoning'],
            'hasRecommendation': result['has_recommendation'],
        }
        if 'price_values' in result:
            response['priceValues'] = result['price_values']
        return jsonify(response)
    except ValueError as e:
        return error(str(e), 400)
    except Exception as e:
        logger.error(f"Price recommendation error: {e}")
        return error('Failed to generate price recommendation', 500)
