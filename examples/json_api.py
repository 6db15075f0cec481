"""
Example: JSON responses, client errors and the response callback

Responses served as application/json come back as JsonResponse objects whose
fields are looked up with get(). 4xx answers are returned like any other
response.
"""

import logging

from courier import Client, JsonResponse, Response


def log_response(response: Response) -> None:
    print(f"  callback: {response!r}")


def main():
    logging.basicConfig(level=logging.DEBUG)

    with Client(base_url="https://httpbin.org", callback=log_response) as client:
        response = client.get("/json")
        print(f"Type: {type(response).__name__}")
        if isinstance(response, JsonResponse):
            print(f"Slideshow title: {response.get('slideshow', {}).get('title')}")

        response = client.post("/anything", json={"name": "courier"})
        print(f"Echoed JSON: {response.get('json')}")

        response = client.get("/status/404")
        print(f"404 returned: {response.get_status_code()} successful={response.is_successful()}")

        response = client.get("/html")
        print(f"HTML content type: {response.get_header_line('content-type')}")
        print(f"HTML body: {response.get_body()[:80]!r}")


if __name__ == "__main__":
    main()
