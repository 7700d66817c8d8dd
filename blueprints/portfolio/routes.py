"""
Portfolio Routes - Public portfolio endpoints
Handles: Project catalog lookups, contact form relay
"""

from flask import request, jsonify, current_app
from extensions import project_catalog
from utils.contact import ContactFormHandler, ContactFormView
from . import portfolio_bp


RESULT_STATUS_CODES = {
    'success': 200,
    'invalid': 400,
    'error': 502,
    'busy': 409
}


class RequestFormView(ContactFormView):
    """Request-scoped form view that records what the handler renders"""

    def __init__(self, fields):
        self.fields = dict(fields)
        self.busy_states = []
        self.message = None
        self.kind = None

    def read_field(self, name):
        value = self.fields.get(name)
        return value if isinstance(value, str) else ''

    def set_busy(self, busy):
        self.busy_states.append(busy)

    def show_message(self, text, kind):
        self.message = text
        self.kind = kind

    def hide_message(self):
        self.message = None
        self.kind = None

    def clear_fields(self):
        self.fields = {}


@portfolio_bp.route('/api/projects')
def list_projects():
    """Catalog summaries for the projects grid"""
    return jsonify({'projects': project_catalog.list_projects()})


@portfolio_bp.route('/api/projects/<project_id>')
def project_detail(project_id):
    """Full project entry for the detail view"""
    project = project_catalog.get(project_id)
    if project is None or project_catalog.is_template(project_id):
        return jsonify({'error': 'Project not found'}), 404

    project['id'] = project_id
    return jsonify(project)


@portfolio_bp.route('/contact', methods=['POST'])
def contact():
    """Relay the contact form to the configured contact endpoint"""
    fields = request.get_json(silent=True)
    if not isinstance(fields, dict):
        fields = request.form.to_dict()

    view = RequestFormView(fields)
    # the response carries the message, nothing to auto-hide
    handler = ContactFormHandler.from_config(
        current_app.config, view, message_timeout=None, logger=current_app.logger)

    result = handler.submit()
    return jsonify({
        'success': result.state == 'success',
        'message': result.text
    }), RESULT_STATUS_CODES.get(result.state, 500)
