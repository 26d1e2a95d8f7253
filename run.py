from quizapp import create_app

app = create_app()

# ==================== LOCAL RUN ONLY (PRODUCTION USES GUNICORN) ====================
if __name__ == '__main__':
    port = app.config['PORT']
    app.logger.info(f'Server running on port {port}')
    app.run(host='0.0.0.0', port=port)
