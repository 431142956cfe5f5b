"""Demo — a tour of layer registration and the response helpers.

Shows plain middleware, prefix routes, handler chains, method filters,
error layers, and every form ``response.send()`` accepts.

Run:
    python app.py
"""

import logging

from switchyard import App, HTTPError

logger = logging.getLogger("demo")

app = App()
route = app.push


# -- Middleware --


def log_request(request, response, proceed):
    logger.info("%s %s query=%s", request.method, request.path, dict(request.query))
    proceed()


route(log_request)


# -- Routes --


def hello(request, response, proceed):
    response.send("Hi there!")


# Answers /hello, /hello.anything and /hello/anything
route("/hello", hello)


def first(request, response, proceed):
    request.state["visited"] = "first"
    proceed()


def second(request, response, proceed):
    response.send(f"Success after {request.state['visited']}")


route("/multi/handler", first, second)


def retrieve(request, response, proceed):
    if request.query.get("id") == "test":
        response.send({"id": "test", "result": "success"})
    else:
        proceed()


def retrieve_usage(request, response, proceed):
    response.send(400, "You must call this URL with the query string ?id=test")


route("GET", "/api/retrieve", retrieve)
route("GET", "/api/retrieve", retrieve_usage)


def wrong_method(request, response, proceed):
    # GET never gets this far: one of the two layers above answered it
    response.send(405, "Must use GET method")


route("/api/retrieve", wrong_method)


def cause_error(request, response, proceed):
    proceed(HTTPError(500, "This is an error message."))


route("/cause/an/error", cause_error)


def explode(request, response, proceed):
    raise ValueError("Handlers may raise, too.")


route("/raise", explode)


def skip_to_error(request, response, proceed):
    proceed(RuntimeError("Skip to the error handler."))


def never_reached(request, response, proceed):
    response.send("This response will never occur.")


route("/error/multi/handler", skip_to_error, never_reached)


async def slow_hello(request, response, proceed):
    body = await request.body()
    response.send({"echo": body.decode("utf-8")})


route("POST", "/async/echo", slow_hello)


def render_error(error, request, response, proceed):
    # Catches errors from every layer above
    response.send(error)


route(render_error)


def reject_post(request, response, proceed):
    proceed(HTTPError(405, "Method Not Allowed"))


route("POST", reject_post)


# -- send() forms --


def send_text(request, response, proceed):
    response.send("Hello")


def send_json(request, response, proceed):
    response.send({"status": 200, "response": "OK"})


def send_array(request, response, proceed):
    response.send([5, 4, 3, 2, 1, "a", "b", "c"])


def send_status(request, response, proceed):
    response.send(201)


def send_status_text(request, response, proceed):
    response.send(201, "Created")


def send_status_json(request, response, proceed):
    response.send(201, {"response": "Created"})


def send_error(request, response, proceed):
    response.send(HTTPError(555, "Test Error"))


def send_error_override(request, response, proceed):
    response.send(500, HTTPError(555, "Test Error"))


def pass_error(request, response, proceed):
    # send(error) answers directly; proceed(error) goes to the error layers
    proceed(HTTPError(555, "Test Error"))


route("/send/text", send_text)
route("/send/json", send_json)
route("/send/array", send_array)
route("/send/status", send_status)
route("/send/status+text", send_status_text)
route("/send/status+json", send_status_json)
route("/send/error", send_error)
route("/send/error2", send_error_override)
route("/send/error3", pass_error)


def custom_not_found(request, response, proceed):
    response.send(404, "Custom Not Found")


route(custom_not_found)


def log_and_render(error, request, response, proceed):
    # Errors from layers below the first error handler end up here
    logger.error("unhandled: %r", error)
    response.send(error)


route(log_and_render)


if __name__ == "__main__":
    app.run()
