#simple flask greeting server
from flask import Flask, request, jsonify, json
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from faq import QUESTIONS
from greeting import GreetingStore
from users import UserRecord, UserRegistry

DEFAULT_CONFIG = {
    'GREETING': 'Hello',
    'HOST': '0.0.0.0',
    'PORT': 5000,
}

# Fixed /greet paths that would otherwise fall through to /greet/<name> on GET
FIXED_PATH_METHODS = {
    'greeting': ['PUT'],
    'login': ['POST'],
    'signup': ['POST'],
}

CORS_HEADERS = {
    'Access-Control-Allow-Origin': 'http://localhost:8080',
    'Access-Control-Allow-Headers': 'Origin, Content-Type, Accept, Authorization',
    'Access-Control-Allow-Credentials': 'true',
    'Access-Control-Allow-Methods': 'GET, POST, PUT, DELETE, OPTIONS, HEAD',
}


def create_app(config=None, greetings=None, registry=None):
    """Builds the greeting app.

    Config is layered: DEFAULT_CONFIG, then FLASK_* environment variables,
    then the ``config`` mapping. The greeting store and user registry are
    created here unless the caller passes its own.
    """
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env()
    if config:
        app.config.update(config)
    # from_prefixed_env JSON-decodes values, so FLASK_GREETING=null arrives as None
    if not isinstance(app.config['GREETING'], str):
        raise ValueError(f"GREETING must be a string, got {app.config['GREETING']!r}")
    app.config['PORT'] = int(app.config['PORT'])

    if greetings is None:
        greetings = GreetingStore(app.config['GREETING'])
    if registry is None:
        registry = UserRegistry()

    def greet(who):
        return jsonify({"message": f"{greetings.get_message()} {who}!"})

    def read_json():
        data = request.get_json()
        return data if isinstance(data, dict) else {}

    @app.after_request
    def add_cors_headers(response):
        for header, value in CORS_HEADERS.items():
            response.headers[header] = value
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        # Keeps headers such as Allow from the original error response
        response = e.get_response()
        response.data = json.dumps({"error": e.description})
        response.content_type = "application/json"
        return response

    @app.route('/greet')
    def default_message():
        return greet('World')

    @app.route('/greet/questions')
    def questions():
        return jsonify(QUESTIONS)

    @app.route('/greet/<name>')
    def message(name):
        if name in FIXED_PATH_METHODS:
            raise MethodNotAllowed(valid_methods=FIXED_PATH_METHODS[name])
        return greet(name)

    @app.route('/greet/greeting', methods=['PUT'])
    def update_greeting():
        data = read_json()
        if 'greeting' not in data:
            return jsonify({"error": "No greeting provided"}), 400
        new_greeting = data['greeting']
        if not isinstance(new_greeting, str):
            return jsonify({"error": "Greeting must be a string"}), 400
        greetings.set_message(new_greeting)
        print(f"[INFO] Greeting changed to '{new_greeting}'")
        return '', 204

    @app.route('/greet/login', methods=['POST'])
    def login():
        user = UserRecord.from_json(read_json())
        if user is None:
            return jsonify({"error": "Username and password required"}), 400
        found = registry.lookup(user.username, user.password)
        if found is None:
            print(f"[WARN] Login failed for user '{user.username}'")
            return jsonify({"error": "Username or Password is wrong!"}), 401
        return jsonify(found.to_dict())

    @app.route('/greet/signup', methods=['POST'])
    def signup():
        user = UserRecord.from_json(read_json())
        if user is None:
            return jsonify({"error": "Username and password required"}), 400
        # Duplicate usernames are ignored but the caller still gets the echo
        if registry.add(user):
            print(f"[INFO] Signed up user '{user.username}'")
        else:
            print(f"[INFO] Signup ignored, user '{user.username}' already exists")
        return jsonify(user.to_dict())

    @app.route('/greet/logout')
    def logout():
        return jsonify({"message": "ok"})

    return app

if __name__ == '__main__':
    app = create_app()
    host, port = app.config['HOST'], app.config['PORT']
    print(f"[INFO] Starting greeting server on http://{host}:{port}")
    app.run(host=host, port=port, threaded=True)
