from hrms import create_app
from hrms.config import get_config
from hrms.models import db

app = create_app(get_config())

if __name__ == "__main__":
    with app.app_context():
        db.create_all()

    app.run(debug=app.config.get("DEBUG", False), port=5000)
