from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate

db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()


def create_app(config_object='hotel.config.Config', overrides=None):
    app = Flask(__name__)
    app.config.from_object(config_object)
    if overrides is not None:
        app.config.update(overrides)

    from hotel.logging import configure_logging
    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    with app.app_context():
        from hotel import models, routes, seed
        from hotel.errors import register_error_handlers

        app.register_blueprint(routes.api)
        register_error_handlers(app)
        app.cli.add_command(seed.seed_command)

        db.create_all()

        if app.config['SEED_DATA']:
            seed.seed_database()

    return app
