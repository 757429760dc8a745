from flask import Blueprint, jsonify
from pix_brcode import config
from pix_brcode.gerador_qr_code import gerar_cobranca_pix
from pix_brcode.validation import validar_json
from pix_brcode.log import configurar_logging
from pix_brcode.limiter import limiter
import logging


configurar_logging()
logger = logging.getLogger(__name__)


pix_bp = Blueprint('pix', __name__)


@pix_bp.route('/payload', methods=['POST'])
@limiter.limit(lambda: config.RATE_LIMIT)
def gerar_payload():
    logger.info('Gerando BR Code PIX...')

    dados = validar_json()
    if isinstance(dados, tuple):
        return dados

    chave = dados.get('chave')
    if chave is None:
        logger.warning('Campo obrigatório: chave')
        return jsonify({'erro': 'Campo obrigatório: chave'}), 400

    for campo in ('chave', 'nome', 'cidade'):
        if dados.get(campo) is not None and not isinstance(dados[campo], str):
            logger.warning(f'Valor inválido para {campo}: {dados.get(campo)}')
            return jsonify({'erro': f'Valor inválido para {campo}!'}), 400

    cobranca = gerar_cobranca_pix(
        chave,
        dados.get('valor'),
        dados.get('nome'),
        dados.get('cidade')
    )

    logger.info(
        f"BR Code gerado com sucesso para chave do tipo {cobranca['tipo_chave']}.")
    return jsonify(cobranca), 200


@pix_bp.route('/saude', methods=['GET'])
@limiter.exempt
def saude():
    return jsonify({'status': 'ok'}), 200
