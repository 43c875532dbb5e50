import logging
from logging.config import fileConfig
from alembic import context
from flask import current_app

# this file is used by alembic and Flask-Migrate
config = context.config
fileConfig(config.config_file_name)
logger = logging.getLogger('alembic.env')

# the app's engine and metadata come from the Flask-Migrate extension
db = current_app.extensions['migrate'].db
config.set_main_option('sqlalchemy.url', str(db.engine.url).replace('%', '%%'))
target_metadata = db.metadata


def run_migrations_offline():
    url = config.get_main_option('sqlalchemy.url')
    context.configure(url=url, target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    with db.engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()
    logger.info('Migrations applied')


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
