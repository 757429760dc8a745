from flask import jsonify, request
from flask_limiter.errors import RateLimitExceeded
from werkzeug.exceptions import HTTPException
from pix_brcode.excecoes import ErroPix
from pix_brcode.log import configurar_logging
import logging


configurar_logging()
logger = logging.getLogger(__name__)


def tratamento_erro_pix(erro: ErroPix):
    logger.warning(f'{type(erro).__name__}: {erro.mensagem}')
    return jsonify({'erro': erro.mensagem}), 400


def register_erro_handlers(app):
    app.register_error_handler(ErroPix, tratamento_erro_pix)

    @app.errorhandler(404)
    def rota_nao_encontrado(erro):
        logger.warning(f'Rota não encontrada: {str(erro)}')
        return jsonify({'erro': 'Rota não encontrada!'}), 404

    @app.errorhandler(RateLimitExceeded)
    def rate_limit_handler(e):
        logger.warning(
            f"RATE LIMIT excedido | IP={request.remote_addr} | rota={request.path}"
        )
        return jsonify({
            'erro': 'Muitas requisições. Tente novamente mais tarde.'
        }), 429

    @app.errorhandler(405)
    def metodo_errado(erro):
        logger.warning(f'Método HTTP não permitido nesta rota: {str(erro)}')
        return jsonify({'erro': 'Método HTTP não permitido nesta rota!'}), 405

    @app.errorhandler(Exception)
    def erro_interno(erro):
        if isinstance(erro, HTTPException):
            return jsonify({'erro': erro.description}), erro.code

        logger.error(f'Erro inesperado ao acessar a rota: {str(erro)}')
        return jsonify({'erro': 'Erro inesperado ao acessar a rota!'}), 500
