def create_api():
    # Importado aqui para que o núcleo do BR Code não dependa do Flask.
    from flask import Flask
    from pix_brcode.routes.pix import pix_bp
    from pix_brcode.error import register_erro_handlers
    from pix_brcode.limiter import limiter

    app = Flask('PIX')

    limiter.init_app(app)

    app.register_blueprint(pix_bp, url_prefix='/pix')

    register_erro_handlers(app)

    return app
