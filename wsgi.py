import os
from stackgallery import create_app

app = create_app(os.getenv("APP_CONFIG", "config.Config"))

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
