from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from projspec.api.specs import router as specs_router

app = FastAPI(title="Projection Spec Generator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(specs_router)

@app.get("/")
def root():
    return {"status": "ok", "service": "projection-spec-generator"}
