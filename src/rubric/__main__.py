"""Rubric MCPサーバーのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    import logging

    import uvicorn

    from rubric.config import RubricConfig
    from rubric.server import create_server

    config = RubricConfig()
    logging.basicConfig(level=logging.DEBUG if config.verbose else logging.INFO)
    mcp = create_server(config)
    app = mcp.http_app(transport="streamable-http")
    uvicorn.run(app, host=config.host, port=config.port)
