from sudoku_api import create_app

app = create_app()

if __name__ == '__main__':
    host = app.config['HOST']
    port = app.config['PORT']
    app.logger.info(f"Sudoku backend server running on http://{host}:{port}")
    app.run(host=host, port=port)
