from .pipeline.pipeline import main

main()
