from neon_glide.main import main

main()
