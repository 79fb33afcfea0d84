# ABOUTME: shelfscan - vision-assisted book identification for a personal library.
# ABOUTME: Turns a photo's noisy book details into ranked catalog candidates to confirm.
