import os
from waitress import serve
from maintenance_manager.app import create_app
from maintenance_manager.app.database import seed_admin
from maintenance_manager.config import BASE_DIR

os.makedirs(BASE_DIR / 'data', exist_ok=True)

app = create_app()
# Seed the administrator account
seed_admin(app)

serve(app, host="0.0.0.0", port=int(os.environ.get('PORT') or 5000))
