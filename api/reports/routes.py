# api/reports/routes.py

from flask import Blueprint, current_app, jsonify, request

from services import get_services
from services.email_service import DeliveryError

reports_api = Blueprint('reports_api', __name__, url_prefix='/api/reports')

MESSAGE_REPORT_FAILED = 'Could not send report, please try again later'


@reports_api.route('/digest', methods=['POST'])
def send_digest():
    """
    Email a digest of the most recent signups to the report recipient

    Accepts an optional JSON body with a ``label`` for the report title.

    Returns:
        JSON response with the reported rows, or a message when there are none
    """
    data = request.get_json(silent=True) or {}
    label = data.get('label') if isinstance(data, dict) else None
    label = label or current_app.config.get('REPORT_DEFAULT_LABEL')

    try:
        result = get_services().reports.generate(label)
        return jsonify(result.to_dict()), 200
    except DeliveryError as e:
        current_app.logger.error(f"Digest email failed: {str(e)}")
        return jsonify({'success': False, 'message': MESSAGE_REPORT_FAILED}), 500


@reports_api.route('/test', methods=['POST'])
def send_test_report():
    """
    Email a digest built from sample rows, to check delivery settings

    Returns:
        JSON response with the sample rows that were sent
    """
    try:
        result = get_services().reports.send_test_report()
        return jsonify(result.to_dict()), 200
    except DeliveryError as e:
        current_app.logger.error(f"Test report email failed: {str(e)}")
        return jsonify({'success': False, 'message': MESSAGE_REPORT_FAILED}), 500
