from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SANMAR_WSDL_BASE: str = "https://ws.sanmar.com:8080"
    SANMAR_CUSTOMER_NUMBER: str | None = None
    SANMAR_USERNAME: str | None = None
    SANMAR_PASSWORD: str | None = None

    # Dot path to the product list, e.g. "Envelope.Body.getProductsResponse.return.items".
    # Leave unset to let the locator sniff the response.
    SANMAR_PRODUCT_PATH: str | None = None

    SNS_BASE_URL: str = "https://api.ssactivewear.com"
    SNS_API_KEY: str | None = None

    UPSTREAM_TIMEOUT_SECONDS: float = 20.0
    DEFAULT_SUPPLIER: str = "sns"

    class Config:
        env_file = ".env"

settings = Settings()
