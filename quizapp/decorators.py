from functools import wraps

from flask import current_app, request

from quizapp.errors import AuthError


def admin_password_required(f):
    """
    Gate for the admin reports: ?password= must equal ADMIN_PASSWORD.

    Plain shared-secret comparison with no hashing, sessions or rate limiting.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        password = request.args.get('password')
        if password != current_app.config['ADMIN_PASSWORD']:
            current_app.logger.warning(f'Rejected admin request to {request.path} from {request.remote_addr}')
            raise AuthError()
        return f(*args, **kwargs)

    return decorated_function
