import os


NOME_PADRAO = os.environ.get('PIX_NOME_PADRAO', 'PROFISSIONAL')
CIDADE_PADRAO = os.environ.get('PIX_CIDADE_PADRAO', 'SAO PAULO')

QR_CODE_API = os.environ.get(
    'PIX_QR_CODE_API', 'https://api.qrserver.com/v1/create-qr-code/')
QR_CODE_TAMANHO = int(os.environ.get('PIX_QR_CODE_TAMANHO', '200'))

RATE_LIMIT = os.environ.get('PIX_RATE_LIMIT', '100 per hour')

LOG_DIR = os.environ.get('PIX_LOG_DIR', 'logs')
LOG_LEVEL = os.environ.get('PIX_LOG_LEVEL', 'INFO').upper()

API_PORTA = int(os.environ.get('PIX_API_PORTA', '5004'))
