import os

from brickly.Init.main import create_app

config_name = os.getenv("BRICKLY_ENV", "DevelopmentConfig")
app = create_app(config_name)

if __name__ == "__main__":
    debug_mode = app.config.get("DEBUG", False)

    app.run(
        host="0.0.0.0",
        port=app.config.get("PORT", 4000),
        debug=debug_mode,
        use_reloader=False
    )
