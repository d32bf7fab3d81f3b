from flask import current_app
from werkzeug.exceptions import HTTPException
from hrms.models import db
from hrms.utils.responses import fail


class HRMSError(Exception):
    status_code = 400

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class ValidationError(HRMSError):
    status_code = 400


class AuthenticationError(HRMSError):
    status_code = 401


class ForbiddenError(HRMSError):
    status_code = 403


class NotFoundError(HRMSError):
    status_code = 404


class ConflictError(HRMSError):
    status_code = 409


def register_error_handlers(app):
    @app.errorhandler(HRMSError)
    def handle_hrms_error(err):
        db.session.rollback()
        return fail(err.message, err.status_code, errors=err.errors)

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        return fail(err.description or err.name, err.code)

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        db.session.rollback()
        current_app.logger.exception("Unhandled error on request")
        return fail("An internal server error occurred.", 500)
