from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event

# SQLAlchemy instance (init in app)
db = SQLAlchemy()


def _set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable WAL mode and other optimizations for SQLite."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.execute("PRAGMA busy_timeout=5000")
    cursor.close()


def init_db_events(app):
    """Initialize database event listeners for SQLite optimizations."""
    uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    # WAL is meaningless for in-memory databases
    if uri.startswith('sqlite') and ':memory:' not in uri:
        with app.app_context():
            event.listen(db.engine, "connect", _set_sqlite_pragma)


class Record(db.Model):
    __tablename__ = 'records'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    surname = db.Column(db.String(200), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    phone_number = db.Column(db.String(200), nullable=False)

    # Column order shared by every export
    EXPORT_HEADERS = ('ID', 'Name', 'Surname', 'Age', 'Phone Number')

    def export_row(self):
        return [self.id, self.name, self.surname, self.age, self.phone_number]

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'surname': self.surname,
            'age': self.age,
            'phone_number': self.phone_number,
        }

    def __repr__(self):
        return f"<Record {self.id} {self.name} {self.surname}>"
