# main.py — run the service: `python main.py` (or `uvicorn app.main:app`)
import os

import uvicorn

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

if __name__ == "__main__":
    print(f"Server is running on port {PORT}...")
    uvicorn.run("app.main:app", host=HOST, port=PORT)  # noqa: S104
