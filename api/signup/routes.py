# api/signup/routes.py

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from services import get_services
from services.email_service import DeliveryError
from services.service_constants import CHILDREN_NAME_KEYS
from services.signup_service import ValidationError

signup_api = Blueprint('signup_api', __name__, url_prefix='/api')

MESSAGE_SIGNUP_SUCCESSFUL = 'Signup successful'
MESSAGE_DELIVERY_FAILED = 'Could not send confirmation email, please try again later'
MESSAGE_SERVER_ERROR = 'Server error'


def _read_payload() -> Dict[str, Any]:
    """Return the request body as a dict, from JSON or form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data

    payload: Dict[str, Any] = request.form.to_dict()
    for key in CHILDREN_NAME_KEYS:
        values = request.form.getlist(key)
        if len(values) > 1:
            payload[key] = values
    return payload


@signup_api.route('/signup', methods=['POST'])
def signup():
    """
    Newsletter signup endpoint

    Accepts a JSON body (or form fields) with parentName, parentEmail and
    optionally the children's names. Validates the input, records the
    signup, and sends the welcome email.

    Returns:
        JSON response with the stored record or an error message
    """
    try:
        result = get_services().signups.process(_read_payload())
        response = result.to_dict()
        response['message'] = MESSAGE_SIGNUP_SUCCESSFUL
        return jsonify(response), 200

    except ValidationError as e:
        return jsonify({'success': False, 'message': str(e)}), 400
    except DeliveryError as e:
        current_app.logger.error(f"Confirmation email failed: {str(e)}")
        return jsonify({'success': False, 'message': MESSAGE_DELIVERY_FAILED}), 500
    except Exception:
        current_app.logger.exception("Unexpected error during signup")
        return jsonify({'success': False, 'message': MESSAGE_SERVER_ERROR}), 500
