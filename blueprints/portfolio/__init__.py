"""
Portfolio Blueprint - Public portfolio endpoints
Handles: Project catalog lookups, contact form relay
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
