"""SiteCompiler: crawl a website and compile its pages into one document."""
