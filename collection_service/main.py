# collection_service/main.py
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from . import database
from .database import PRODUCTS, CATEGORIES
from .schemas import ProductIn, _make_product_dict

app = FastAPI(title="clothing catalog collection service (in-memory)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------
# Product endpoints
# ---------------------------
@app.get("/products")
async def list_products():
    return list(PRODUCTS.values())

@app.post("/products", status_code=201)
async def create_product(payload: ProductIn):
    pid = database.next_product_id()
    PRODUCTS[pid] = _make_product_dict(pid, payload)
    return PRODUCTS[pid]

@app.put("/products/{product_id}")
async def replace_product(product_id: int, payload: ProductIn):
    if product_id not in PRODUCTS:
        raise HTTPException(status_code=404, detail="product not found")
    PRODUCTS[product_id] = _make_product_dict(product_id, payload)
    return PRODUCTS[product_id]

# ---------------------------
# Category endpoints
# ---------------------------
@app.get("/categories")
async def list_categories():
    return list(CATEGORIES.values())

# ---------------------------
# Utility: reset (for tests/demo)
# ---------------------------
@app.post("/reset")
async def reset_all():
    database.reset_all()
    return {"status": "reset"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=3001)
