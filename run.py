from pix_brcode import create_api
from pix_brcode.config import API_PORTA


def main():
    app = create_api()
    app.run(debug=True, port=API_PORTA, use_reloader=False)


if __name__ == '__main__':
    main()
