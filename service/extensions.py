# service/extensions.py

from flask_cors import CORS

cors = CORS()
