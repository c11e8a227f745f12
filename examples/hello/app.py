"""Hello World — the simplest wren app.

Demonstrates routes, capture-group parameters, skipping to the next
route, and an error handler.

Run:
    python app.py
"""

import re

from wren import App, errorhandler

app = App()


@app.get("/")
def index(request, response, next):
    response.end("Hello, World!")


@app.get(re.compile(r"/greet/(\w+)"))
def greet(request, response, next):
    response.end(f"Hello, {request.params[0]}!")


def only_admin(request, response, next):
    if request.params[0] != "admin":
        next.route()
        return
    next()


def admin_page(request, response, next):
    response.end("Welcome back, admin.")


# Both handlers form one group; non-admin users fall through to the next one.
app.get(r"/users/(\w+)", only_admin, admin_page)


@app.get(r"/users/(\w+)")
def user_page(request, response, next):
    response.end(f"Profile of {request.params[0]}")


@app.get("/boom")
def boom(request, response, next):
    raise RuntimeError("something broke")


@app.use()
@errorhandler
def on_error(error, request, response, next):
    response.write_head(500, {"Content-Type": "text/plain"})
    response.end(f"Sorry: {error}")


if __name__ == "__main__":
    app.listen(3000)
