from pymongo import MongoClient

from ..utils.logger import Log


class MongoDB:
    def __init__(self):
        self.client = None
        self.db = None

    def init_app(self, app, client=None):
        """
        Bind the document store to the app.
        A pre-built client (e.g. an in-process fake) can be passed in; otherwise
        one is created from MONGO_URI.
        """
        db_name = app.config.get("DB_NAME", "merchant_platform")

        if client is None:
            client = MongoClient(app.config["MONGO_URI"], tz_aware=True)

        self.client = client
        self.db = self.client[db_name]
        app.mongo = self.db

        Log.info(f"[db.py][MongoDB][init_app] connected to database '{db_name}'")

    def get_collection(self, name):
        if self.db is None:
            raise RuntimeError("MongoDB not initialized")
        return self.db[name]


# Export the instance
db = MongoDB()
