from sessiond import create_app

app = create_app()

if __name__ == "__main__":
    # threaded=True -> one thread per request, hence the store and session locks
    app.run(app.config["HOST"], app.config["PORT"], debug=False, threaded=True)
