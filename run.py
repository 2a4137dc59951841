from gooddogs import create_app

app = create_app()

if __name__ == "__main__":
    app.logger.info('Good Dogs server running on port %s', app.config['PORT'])
    app.run(host="0.0.0.0", port=app.config['PORT'])
