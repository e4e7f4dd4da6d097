from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request


def request_identity():
    """The verified identity reference on the current request, or None."""
    verify_jwt_in_request(optional=True)
    return get_jwt_identity()
