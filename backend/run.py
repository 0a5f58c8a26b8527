from drawroom import create_app, server_options, socketio

app = create_app()

if __name__ == '__main__':
    options = server_options(app)
    app.logger.info(f"[server] listening on {options['port']}")
    socketio.run(app, **options)
